"""
Load compiled module artifacts from a Foundry `out/` directory.

Forge writes one JSON file per contract at `out/<File>.sol/<Name>.json`
(or `<Name>.<solc version>.json` when several compiler versions are used).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from eth_utils import decode_hex

from solscaffold.errors import ArtifactNotFound, MissingAbi, MissingBytecode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractInfo:
    """A module identifier, either `Name` or `path/to/File.sol:Name`."""

    name: str
    path: str | None = None

    @classmethod
    def parse(cls, identifier: str) -> "ContractInfo":
        if ":" in identifier:
            path, name = identifier.rsplit(":", 1)
            return cls(name=name, path=path)
        return cls(name=identifier)


@dataclass
class ModuleArtifact:
    name: str
    artifact_path: Path
    abi: list[dict[str, Any]]
    bytecode: bytes
    address: str | None = field(default=None)


def _candidates(directory: Path, name: str) -> list[Path]:
    exact = directory / f"{name}.json"
    if exact.exists():
        return [exact]
    return sorted(directory.glob(f"{name}.*.json"))


def find_artifact(out_dir: Path, info: ContractInfo) -> Path:
    """Locate the artifact for a contract, preferring its declared source file.

    Raises:
        ArtifactNotFound: If no artifact matches.
    """
    if info.path:
        matches = _candidates(out_dir / Path(info.path).name, info.name)
        if matches:
            return matches[0]
        logger.debug(f"No artifact for {info.name} under {info.path}, searching all sources")

    if out_dir.is_dir():
        for source_dir in sorted(p for p in out_dir.iterdir() if p.is_dir()):
            matches = _candidates(source_dir, info.name)
            if matches:
                return matches[0]

    raise ArtifactNotFound(info.name)


def _extract_bytecode(artifact: dict[str, Any]) -> bytes | None:
    bytecode = artifact.get("bytecode")
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object")
    if not bytecode or bytecode == "0x":
        return None
    # Unlinked library placeholders (__$...$__) cannot be hashed into an address
    if "__" in bytecode:
        return None
    return decode_hex(bytecode)


def load_module(out_dir: Path, identifier: str) -> ModuleArtifact:
    """Resolve a module identifier to its ABI and creation bytecode.

    Raises:
        ArtifactNotFound: If the artifact is missing or unreadable.
        MissingBytecode: If the contract has no deployable bytecode.
        MissingAbi: If the artifact carries no ABI.
    """
    info = ContractInfo.parse(identifier)
    artifact_path = find_artifact(out_dir, info)

    try:
        artifact = json.loads(artifact_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ArtifactNotFound(info.name, f"{artifact_path}: {e}") from e

    bytecode = _extract_bytecode(artifact)
    if bytecode is None:
        raise MissingBytecode(info.name)

    abi = artifact.get("abi")
    if abi is None:
        raise MissingAbi(info.name)

    logger.debug(f"Loaded {info.name} from {artifact_path} ({len(bytecode)} bytes)")
    return ModuleArtifact(name=info.name, artifact_path=artifact_path, abi=abi, bytecode=bytecode)
