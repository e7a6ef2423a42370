"""
Render the dispatch tree and module table as Yul/Solidity text.

Output shape for a branch (right subtree stays at the guard's level, it is
the implicit else path):

    if lt(sig, 0x70a08231) {
        switch sig
            case 0x095ea7b3 { result := _TOKEN } // Token.approve()
        leave
    }
    switch sig
        case 0x70a08231 { result := _TOKEN } // Token.balanceOf()
    leave
"""

from __future__ import annotations

from collections.abc import Iterable

from solscaffold.helpers.identifiers import to_constant_case
from solscaffold.router.tree import DispatchBranch, DispatchEntry, DispatchNode, first_entry

INDENT = "    "

# Depth of the selector block inside the router template's Yul function
BASE_INDENT = 4


def _render_node(node: DispatchNode, depth: int, lines: list[str]) -> None:
    pad = INDENT * depth

    if isinstance(node, DispatchBranch):
        boundary = first_entry(node.right).selector
        lines.append(f"{pad}if lt(sig, {boundary}) {{")
        _render_node(node.left, depth + 1, lines)
        lines.append(f"{pad}}}")
        _render_node(node.right, depth, lines)
        return

    # Yul rejects a switch without cases; with no entries the lookup falls
    # through to `leave` and returns the zero address
    if node.entries:
        lines.append(f"{pad}switch sig")
    for entry in node.entries:
        lines.append(
            f"{pad}{INDENT}case {entry.selector} {{ result := {to_constant_case(entry.module_name)} }}"
            f" // {entry.module_name}.{entry.function_name}()"
        )
    lines.append(f"{pad}leave")


def render_selectors(tree: DispatchNode, indent: int = BASE_INDENT) -> str:
    lines: list[str] = []
    _render_node(tree, indent, lines)
    return "\n".join(lines)


def render_modules(entries: Iterable[DispatchEntry]) -> str:
    """One address constant per module, in first-seen order."""
    seen: set[str] = set()
    lines = []
    for entry in entries:
        if entry.module_name in seen:
            continue
        seen.add(entry.module_name)
        lines.append(f"address constant {to_constant_case(entry.module_name)} = {entry.address};")
    return "\n".join(lines)
