"""ABI helpers: canonical signatures and 4-byte selectors."""

from __future__ import annotations

from typing import Any

from eth_utils import encode_hex, keccak
from eth_utils.abi import collapse_if_tuple

FUNCTION = "function"
FALLBACK = "fallback"
RECEIVE = "receive"


def function_signature(item: dict[str, Any]) -> str:
    """Canonical signature, e.g. `swap((address,uint256)[],bytes)`."""
    inputs = ",".join(collapse_if_tuple(i) for i in item.get("inputs", []))
    return f"{item['name']}({inputs})"


def function_selector(item: dict[str, Any]) -> str:
    """4-byte selector as a fixed-width lowercase hex string, e.g. `0xa9059cbb`."""
    return encode_hex(keccak(text=function_signature(item))[:4])

