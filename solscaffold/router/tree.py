"""
Binary dispatch tree over function selectors.

Selectors are sorted and split in half until each leaf holds at most
MAX_SELECTORS_PER_SWITCH entries. The renderer turns every branch into a
single `lt` comparison and every leaf into a `switch`, so a lookup costs
O(log n) comparisons plus one small switch instead of a linear scan.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Union

# Fixed so that generated code size is reproducible
MAX_SELECTORS_PER_SWITCH = 9


@dataclass(frozen=True)
class DispatchEntry:
    """One routable function."""

    address: str
    module_name: str
    function_name: str
    selector: str


@dataclass(frozen=True)
class DispatchLeaf:
    entries: tuple[DispatchEntry, ...]


@dataclass(frozen=True)
class DispatchBranch:
    left: "DispatchNode"
    right: "DispatchNode"


DispatchNode = Union[DispatchLeaf, DispatchBranch]


def sort_entries(entries: Iterable[DispatchEntry]) -> list[DispatchEntry]:
    # Plain string order; equals numeric order for fixed-width lowercase hex
    return sorted(entries, key=lambda entry: entry.selector)


def split_entries(entries: Sequence[DispatchEntry]) -> DispatchNode:
    """Split already sorted entries; the caller guarantees selector order."""
    if len(entries) <= MAX_SELECTORS_PER_SWITCH:
        return DispatchLeaf(tuple(entries))

    mid = (len(entries) + 1) // 2
    return DispatchBranch(left=split_entries(entries[:mid]), right=split_entries(entries[mid:]))


def build_dispatch_tree(entries: Iterable[DispatchEntry]) -> DispatchNode:
    """Sort entries by selector and split them into a balanced tree."""
    return split_entries(sort_entries(entries))


def first_entry(node: DispatchNode) -> DispatchEntry:
    """Smallest selector in a subtree: the leftmost leaf's first entry."""
    while isinstance(node, DispatchBranch):
        node = node.left
    return node.entries[0]


def iter_leaves(node: DispatchNode) -> Iterator[DispatchLeaf]:
    if isinstance(node, DispatchLeaf):
        yield node
        return
    yield from iter_leaves(node.left)
    yield from iter_leaves(node.right)


def tree_depth(node: DispatchNode) -> int:
    if isinstance(node, DispatchLeaf):
        return 0
    return 1 + max(tree_depth(node.left), tree_depth(node.right))
