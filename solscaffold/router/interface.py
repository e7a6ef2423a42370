"""
Render a merged ABI as a Solidity interface declaration.

Tuple parameters become struct definitions named after their `internalType`
(`struct IPool.Order` -> `Order`). A second, differently shaped struct with
the same short name is qualified by its container (`IVault_Order`). Tuples
with no internal type become `Struct<n>`. Structs are declared before use
and only once.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from eth_abi.grammar import TupleType, parse
from eth_utils.abi import collapse_if_tuple

from solscaffold.helpers.abi import FALLBACK, FUNCTION, RECEIVE

INDENT = "    "


class _StructRegistry:
    def __init__(self) -> None:
        self.names: dict[str, str] = {}
        self.layouts: dict[str, str] = {}
        self.definitions: list[str] = []

    def _struct_name(self, param: dict[str, Any]) -> str:
        internal = param.get("internalType") or ""
        if internal.startswith("struct "):
            qualified = internal[len("struct "):].split("[", 1)[0]
            # `A.Config` and `B.Config` with different fields need distinct names
            for candidate in (qualified.split(".")[-1], qualified.replace(".", "_")):
                if candidate not in self.layouts:
                    return candidate

        index = len(self.names)
        while f"Struct{index}" in self.layouts:
            index += 1
        return f"Struct{index}"

    def register(self, param: dict[str, Any]) -> str:
        """Declare the struct for a tuple parameter and return its name."""
        key = collapse_if_tuple({"type": "tuple", "components": param.get("components", [])})
        if key in self.names:
            return self.names[key]

        # Nested structs are declared first
        fields = [
            f"{self.type_name(component)} {component.get('name') or f'field{idx}'};"
            for idx, component in enumerate(param.get("components", []))
        ]
        name = self._struct_name(param)
        self.names[key] = name
        self.layouts[name] = key
        self.definitions.append(f"struct {name} {{ {' '.join(fields)} }}")
        return name

    def type_name(self, param: dict[str, Any]) -> str:
        type_str = param["type"]
        if type_str.startswith("tuple"):
            return self.register(param) + type_str[len("tuple"):]
        return type_str


def _is_reference_type(param: dict[str, Any]) -> bool:
    abi_type = parse(collapse_if_tuple(param))
    if abi_type.is_array or isinstance(abi_type, TupleType):
        return True
    # string and unsized bytes
    return abi_type.is_dynamic


def _render_params(params: Sequence[dict[str, Any]], structs: _StructRegistry) -> str:
    rendered = []
    for param in params:
        parts = [structs.type_name(param)]
        if _is_reference_type(param):
            parts.append("memory")
        if param.get("name"):
            parts.append(param["name"])
        rendered.append(" ".join(parts))
    return ", ".join(rendered)


def _mutability(item: dict[str, Any]) -> str:
    mutability = item.get("stateMutability")
    if mutability is None:
        if item.get("constant"):
            mutability = "view"
        elif item.get("payable"):
            mutability = "payable"
    if mutability in (None, "nonpayable"):
        return ""
    return f" {mutability}"


def _render_function(item: dict[str, Any], structs: _StructRegistry) -> str:
    line = f"function {item['name']}({_render_params(item.get('inputs', []), structs)}) external"
    line += _mutability(item)
    outputs = item.get("outputs") or []
    if outputs:
        line += f" returns ({_render_params(outputs, structs)})"
    return line + ";"


def render_interface(name: str, abi: Sequence[dict[str, Any]]) -> str:
    structs = _StructRegistry()
    members = []

    for item in abi:
        kind = item.get("type")
        if kind == FUNCTION:
            members.append(_render_function(item, structs))
        elif kind == RECEIVE:
            members.append("receive() external payable;")
        elif kind == FALLBACK:
            members.append(f"fallback() external{_mutability(item)};")

    body = structs.definitions + members
    if not body:
        return f"interface {name} {{}}"
    lines = [f"interface {name} {{"]
    lines.extend(f"{INDENT}{line}" for line in body)
    lines.append("}")
    return "\n".join(lines)
