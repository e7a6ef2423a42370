"""Shared fixtures: fake forge artifacts and ABI builders."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from solscaffold.router.tree import DispatchEntry

COUNTER_ABI = [
    {"type": "function", "name": "increment", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
    {
        "type": "function",
        "name": "number",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256", "internalType": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "setNumber",
        "inputs": [{"name": "newNumber", "type": "uint256", "internalType": "uint256"}],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
]

TOKEN_ABI = [
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "account", "type": "address", "internalType": "address"}],
        "outputs": [{"name": "", "type": "uint256", "internalType": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "transfer",
        "inputs": [
            {"name": "to", "type": "address", "internalType": "address"},
            {"name": "amount", "type": "uint256", "internalType": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool", "internalType": "bool"}],
        "stateMutability": "nonpayable",
    },
    {"type": "receive", "stateMutability": "payable"},
]

_ENV_VARS = (
    "FOUNDRY_PROFILE",
    "FOUNDRY_SRC",
    "FOUNDRY_OUT",
    "FOUNDRY_TEST",
    "ROUTER_DEPLOYER",
    "ROUTER_SALT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def function_item(name: str, *types: str, mutability: str = "nonpayable") -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": f"arg{i}", "type": t, "internalType": t} for i, t in enumerate(types)],
        "outputs": [],
        "stateMutability": mutability,
    }


def make_entries(count: int, module_name: str = "ModA") -> list[DispatchEntry]:
    return [
        DispatchEntry(
            address="0x000000000000000000000000000000000000dEaD",
            module_name=module_name,
            function_name=f"f{i}",
            selector=f"0x{i:08x}",
        )
        for i in range(1, count + 1)
    ]


def write_artifact(
    out_dir: Path,
    name: str,
    abi: list[dict[str, Any]] | None,
    bytecode: str | None = "0x6080604052",
    source: str | None = None,
    filename: str | None = None,
) -> Path:
    artifact_dir = out_dir / (source or f"{name}.sol")
    artifact_dir.mkdir(parents=True, exist_ok=True)
    artifact: dict[str, Any] = {}
    if abi is not None:
        artifact["abi"] = abi
    if bytecode is not None:
        artifact["bytecode"] = {"object": bytecode, "linkReferences": {}}
    path = artifact_dir / (filename or f"{name}.json")
    path.write_text(json.dumps(artifact), encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A Foundry project with Counter and Token compiled into out/."""
    out_dir = tmp_path / "out"
    write_artifact(out_dir, "Counter", COUNTER_ABI, bytecode="0x6080604052348015600e575f80fd5b50")
    write_artifact(out_dir, "Token", TOKEN_ABI, bytecode="0x608060405234801561001057600080fd5b50")
    return tmp_path
