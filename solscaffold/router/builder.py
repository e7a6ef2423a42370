"""
Router generation: load modules, derive addresses, build and render the
dispatch tree, and fill the router template.

Everything here happens in memory; nothing is written unless every step
succeeds.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from solscaffold.config.settings import ProjectPaths, RouterConfig
from solscaffold.helpers.artifacts import ModuleArtifact, load_module
from solscaffold.helpers.create2 import compute_create2_address
from solscaffold.helpers.identifiers import format_identifier
from solscaffold.router.collector import collect_selectors
from solscaffold.router.interface import render_interface
from solscaffold.router.render import render_modules, render_selectors
from solscaffold.router.tree import sort_entries, split_entries

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
ROUTER_TEMPLATE = TEMPLATES_DIR / "RouterTemplate.g.sol"


def load_modules(out_dir: Path, module_names: Sequence[str], config: RouterConfig) -> list[ModuleArtifact]:
    modules = []
    for identifier in module_names:
        module = load_module(out_dir, identifier)
        module.address = compute_create2_address(config.deployer, config.salt, module.bytecode)
        logger.info(f"{module.name} -> {module.address}")
        modules.append(module)
    return modules


def render_router(router_name: str, modules: Sequence[ModuleArtifact]) -> str:
    """Render the router source for already loaded modules."""
    router_name = format_identifier(router_name, True)
    collected = collect_selectors(modules)

    entries = sort_entries(collected.entries)
    tree = split_entries(entries)

    fragments = {
        "{selectors}": render_selectors(tree),
        "{interface}": render_interface(f"I{router_name}", collected.abi),
        "{router_name}": router_name,
        "{modules}": render_modules(entries),
    }

    content = ROUTER_TEMPLATE.read_text(encoding="utf-8")
    for placeholder, value in fragments.items():
        content = content.replace(placeholder, value)
    return content


def build_router(
    paths: ProjectPaths,
    config: RouterConfig,
    router_name: str,
    module_names: Sequence[str],
) -> str:
    """
    Generate the router source for the given modules.

    Args:
        paths: Project layout (artifacts are read from paths.out)
        config: CREATE2 deployer and salt used to derive module addresses
        router_name: Router contract name, PascalCased in the output
        module_names: Module identifiers (`Name` or `path/File.sol:Name`)

    Returns:
        Router source text

    Raises:
        GenerateError: On any lookup, collision or conflict; no partial output
    """
    modules = load_modules(paths.out, module_names, config)
    return render_router(router_name, modules)


def write_router(paths: ProjectPaths, router_name: str, content: str) -> Path:
    paths.routers_dir.mkdir(parents=True, exist_ok=True)
    router_path = paths.routers_dir / f"{router_name}.g.sol"
    router_path.write_text(content, encoding="utf-8")
    return router_path
