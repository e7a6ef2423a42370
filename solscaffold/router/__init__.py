"""Multi-module router generation."""

from solscaffold.router.builder import build_router, render_router, write_router
from solscaffold.router.collector import CollectedSelectors, collect_selectors
from solscaffold.router.interface import render_interface
from solscaffold.router.render import render_modules, render_selectors
from solscaffold.router.tree import (
    MAX_SELECTORS_PER_SWITCH,
    DispatchBranch,
    DispatchEntry,
    DispatchLeaf,
    DispatchNode,
    build_dispatch_tree,
    sort_entries,
    split_entries,
)

__all__ = [
    'build_router',
    'render_router',
    'write_router',
    'CollectedSelectors',
    'collect_selectors',
    'render_interface',
    'render_modules',
    'render_selectors',
    'MAX_SELECTORS_PER_SWITCH',
    'DispatchBranch',
    'DispatchEntry',
    'DispatchLeaf',
    'DispatchNode',
    'build_dispatch_tree',
    'sort_entries',
    'split_entries',
]
