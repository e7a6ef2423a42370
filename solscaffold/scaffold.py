"""Boilerplate forge test files."""

from __future__ import annotations

from pathlib import Path

from solscaffold.config.settings import ProjectPaths
from solscaffold.helpers.identifiers import format_identifier

TEST_TEMPLATE = Path(__file__).resolve().parent / "templates" / "TestTemplate.t.sol"


def render_test_file(contract_name: str) -> tuple[str, str]:
    """Return (PascalCase contract name, test file content)."""
    pascal = format_identifier(contract_name, True)
    instance = format_identifier(contract_name, False)

    content = TEST_TEMPLATE.read_text(encoding="utf-8")
    content = content.replace("{contract_name}", pascal).replace("{instance_name}", instance)
    return pascal, content


def write_test_file(paths: ProjectPaths, contract_name: str) -> Path:
    pascal, content = render_test_file(contract_name)

    paths.test.mkdir(parents=True, exist_ok=True)
    test_path = paths.test / f"{pascal}.t.sol"
    test_path.write_text(content, encoding="utf-8")
    return test_path
