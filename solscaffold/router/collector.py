"""
Flatten module ABIs into dispatch entries and a merged ABI.

A router forwards each selector to exactly one module, so selectors must be
unique across modules, and only one module may provide the fallback and
one the receive function.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from solscaffold.errors import ConflictingSpecialFunction, DuplicateSelector
from solscaffold.helpers.abi import FALLBACK, FUNCTION, RECEIVE, function_selector
from solscaffold.helpers.artifacts import ModuleArtifact
from solscaffold.router.tree import DispatchEntry

logger = logging.getLogger(__name__)


@dataclass
class CollectedSelectors:
    entries: list[DispatchEntry] = field(default_factory=list)
    functions: list[dict[str, Any]] = field(default_factory=list)
    fallback: dict[str, Any] | None = None
    receive: dict[str, Any] | None = None

    @property
    def abi(self) -> list[dict[str, Any]]:
        """Merged ABI: all functions, then receive and fallback if present."""
        abi = list(self.functions)
        if self.receive is not None:
            abi.append(self.receive)
        if self.fallback is not None:
            abi.append(self.fallback)
        return abi


def collect_selectors(modules: Sequence[ModuleArtifact]) -> CollectedSelectors:
    """
    Build dispatch entries for every function of every module.

    Args:
        modules: Loaded modules with their deployment address set

    Returns:
        Entries in collection order plus the merged ABI

    Raises:
        DuplicateSelector: If two functions share a selector
        ConflictingSpecialFunction: If two modules declare fallback or receive
    """
    collected = CollectedSelectors()
    by_selector: dict[str, DispatchEntry] = {}
    special_owner: dict[str, str] = {}

    for module in modules:
        for item in module.abi:
            kind = item.get("type")

            if kind == FUNCTION:
                selector = function_selector(item)
                if selector in by_selector:
                    raise DuplicateSelector(selector, by_selector[selector].module_name, module.name)

                entry = DispatchEntry(
                    address=module.address,
                    module_name=module.name,
                    function_name=item["name"],
                    selector=selector,
                )
                by_selector[selector] = entry
                collected.entries.append(entry)
                collected.functions.append(item)

            elif kind in (FALLBACK, RECEIVE):
                if kind in special_owner:
                    raise ConflictingSpecialFunction(kind, special_owner[kind], module.name)
                special_owner[kind] = module.name
                setattr(collected, kind, item)

    logger.debug(f"Collected {len(collected.entries)} selectors from {len(modules)} modules")
    return collected
