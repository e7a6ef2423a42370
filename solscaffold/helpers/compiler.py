"""Run `forge build` so module artifacts are fresh before generation."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from solscaffold.errors import CompilationError

logger = logging.getLogger(__name__)


def build_command(root: Path, skip: list[str]) -> list[str]:
    cmd = [
        "forge", "build",
        "--root", str(root),
        "--extra-output", "abi",
        "--skip", "test",
    ]
    for pattern in skip:
        cmd.extend(["--skip", pattern])
    return cmd


def build_project(root: Path, routers_dir: Path) -> None:
    """
    Compile the project, skipping tests and previously generated routers.

    Raises:
        CompilationError: If forge is missing or the build fails
    """
    cmd = build_command(root, [f"{routers_dir}/**"])
    logger.info(f"Command: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, capture_output=True, text=True, check=True, cwd=root)
    except FileNotFoundError as e:
        raise CompilationError("forge not found. Install Foundry or pass --skip-build") from e
    except subprocess.CalledProcessError as e:
        raise CompilationError("Compilation failed:", e.stderr or e.stdout or "") from e

    logger.debug("Compilation successful")
