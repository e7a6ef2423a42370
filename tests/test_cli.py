"""Tests for solscaffold.cli and solscaffold.scaffold."""

import os
from pathlib import Path

import pytest

from conftest import COUNTER_ABI, write_artifact
from solscaffold import cli
from solscaffold.errors import CompilationError
from solscaffold.scaffold import render_test_file


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


class TestRenderTestFile:
    def test_names(self) -> None:
        name, content = render_test_file("my counter")
        assert name == "MyCounter"
        assert 'import {MyCounter} from "../src/MyCounter.sol";' in content
        assert "contract MyCounterTest is Test {" in content
        assert "    MyCounter public myCounter;" in content
        assert "        myCounter = new MyCounter();" in content
        assert "{contract_name}" not in content
        assert "{instance_name}" not in content


class TestTestCommand:
    def test_writes_test_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["test", "--contract-name", "Counter", "--root", str(tmp_path)]) == 0

        test_path = tmp_path.resolve() / "test" / "Counter.t.sol"
        assert test_path.exists()
        assert "contract CounterTest is Test" in test_path.read_text(encoding="utf-8")
        assert f"Generated test file: {test_path}" in capsys.readouterr().out

    def test_requires_contract_name(self) -> None:
        with pytest.raises(SystemExit):
            cli.main(["test"])


class TestRouterCommand:
    def test_writes_router(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = cli.main(["router", "--name", "MyRouter", "--root", str(project), "--skip-build", "Counter", "Token"])
        assert code == 0

        router_path = project.resolve() / "src" / "generated" / "routers" / "MyRouter.g.sol"
        assert router_path.exists()
        assert "contract MyRouter {" in router_path.read_text(encoding="utf-8")
        assert f"Generated router file: {router_path}" in capsys.readouterr().out

    def test_runs_build_by_default(self, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(cli, "build_project", lambda root, routers_dir: calls.append((root, routers_dir)))

        assert cli.main(["router", "--name", "R", "--root", str(project), "Counter"]) == 0
        assert calls == [(project.resolve(), project.resolve() / "src" / "generated" / "routers")]

    def test_build_failure(self, project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        def fail(root, routers_dir):
            raise CompilationError("Compilation failed:", "Error: bad pragma")

        monkeypatch.setattr(cli, "build_project", fail)
        assert cli.main(["router", "--name", "R", "--root", str(project), "Counter"]) == 1
        assert "bad pragma" in capsys.readouterr().err

    def test_duplicate_selector_writes_nothing(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        write_artifact(project / "out", "CounterV2", COUNTER_ABI)

        code = cli.main(["router", "--name", "R", "--root", str(project), "--skip-build", "Counter", "CounterV2"])
        assert code == 1
        assert not (project / "src" / "generated").exists()
        err = capsys.readouterr().err
        assert err.startswith("Error: Duplicate selector")
        assert "`Counter`" in err and "`CounterV2`" in err

    def test_conflicting_receive(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        write_artifact(project / "out", "Vault", [{"type": "receive", "stateMutability": "payable"}])

        code = cli.main(["router", "--name", "R", "--root", str(project), "--skip-build", "Token", "Vault"])
        assert code == 1
        assert "Multiple receive functions" in capsys.readouterr().err

    def test_invalid_salt(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = cli.main(["router", "--name", "R", "--root", str(project), "--skip-build", "--salt", "0x01", "Counter"])
        assert code == 1
        assert "Salt must be 32 bytes" in capsys.readouterr().err

    def test_env_file(self, project: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / "router.env"
        env_file.write_text("ROUTER_SALT=0x" + "01" * 32 + "\n", encoding="utf-8")
        monkeypatch.setattr(cli, "build_project", lambda root, routers_dir: None)
        router_path = project / "src" / "generated" / "routers" / "R.g.sol"

        assert cli.main(["router", "--name", "R", "--root", str(project), "Counter"]) == 0
        default = router_path.read_text(encoding="utf-8")
        try:
            assert cli.main(["--env-file", str(env_file), "router", "--name", "R", "--root", str(project), "Counter"]) == 0
        finally:
            os.environ.pop("ROUTER_SALT", None)
        salted = router_path.read_text(encoding="utf-8")

        assert salted != default

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main([]) == 2
        assert "usage:" in capsys.readouterr().out
