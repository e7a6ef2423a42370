"""
Project and router configuration.

Project layout follows Foundry conventions: `foundry.toml` profile keys,
overridden by FOUNDRY_* environment variables. Router settings (CREATE2
deployer and salt) come from CLI arguments, then ROUTER_* environment
variables, then the defaults below.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from eth_typing import ChecksumAddress
from eth_utils import decode_hex, is_address, to_checksum_address


# Deterministic deployment proxy, present at the same address on most chains
DEFAULT_DEPLOYER = "0x4e59b44847b379578588920ca78fbf26c0b4956c"
DEFAULT_SALT = "0x" + "00" * 32

DEFAULT_SRC = "src"
DEFAULT_OUT = "out"
DEFAULT_TEST = "test"

ROUTERS_SUBDIR = Path("generated") / "routers"


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    src: Path
    out: Path
    test: Path

    @property
    def routers_dir(self) -> Path:
        return self.src / ROUTERS_SUBDIR


@dataclass(frozen=True)
class RouterConfig:
    deployer: ChecksumAddress
    salt: bytes


def _read_foundry_profile(root: Path) -> dict[str, Any]:
    config_path = root / "foundry.toml"
    if not config_path.exists():
        return {}
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid {config_path}: {e}") from e

    profile = os.getenv("FOUNDRY_PROFILE", "default")
    profiles = data.get("profile", {})
    # Non-default profiles inherit from default
    merged = dict(profiles.get("default", {}))
    if profile != "default":
        merged.update(profiles.get(profile, {}))
    return merged


def load_project_paths(root: str | Path | None = None) -> ProjectPaths:
    """Resolve the src/out/test directories of a Foundry project.

    Args:
        root: Project root. Defaults to the current working directory.

    Returns:
        Absolute project paths.

    Raises:
        ValueError: If foundry.toml cannot be parsed.
    """
    root_path = Path(root or Path.cwd()).resolve()
    profile = _read_foundry_profile(root_path)

    def resolve(key: str, env_name: str, default: str) -> Path:
        value = os.getenv(env_name) or profile.get(key) or default
        path = Path(value)
        return path if path.is_absolute() else root_path / path

    return ProjectPaths(
        root=root_path,
        src=resolve("src", "FOUNDRY_SRC", DEFAULT_SRC),
        out=resolve("out", "FOUNDRY_OUT", DEFAULT_OUT),
        test=resolve("test", "FOUNDRY_TEST", DEFAULT_TEST),
    )


def parse_deployer(value: str) -> ChecksumAddress:
    if not is_address(value):
        raise ValueError(f"Invalid deployer address: {value}")
    return to_checksum_address(value)


def parse_salt(value: str) -> bytes:
    try:
        salt = decode_hex(value)
    except ValueError as e:
        raise ValueError(f"Invalid salt: {value}") from e
    if len(salt) != 32:
        raise ValueError(f"Salt must be 32 bytes, got {len(salt)}: {value}")
    return salt


def load_router_config(deployer: str | None = None, salt: str | None = None) -> RouterConfig:
    """Build router settings from explicit values, env, or defaults.

    Raises:
        ValueError: If the deployer or salt is malformed.
    """
    deployer = deployer or os.getenv("ROUTER_DEPLOYER") or DEFAULT_DEPLOYER
    salt = salt or os.getenv("ROUTER_SALT") or DEFAULT_SALT
    return RouterConfig(deployer=parse_deployer(deployer), salt=parse_salt(salt))
