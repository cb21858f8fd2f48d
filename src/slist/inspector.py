"""
Chain Inspector: integrity diagnostics for SinglyLinkedList instances.

This module provides lightweight, read-only analysis of a list's chain:
    - Node inventory (walked count vs. cached counter)
    - Cycle detection
    - Entry inventory (None entries, the same object stored twice)
    - Warning flags for a broken invariant

IMPORTANT: The inspector does NOT modify the list.
It walks the nodes directly, guarding against cycles, so it is safe to run
on a chain that was corrupted from outside the list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from slist.linked_list import SinglyLinkedList
from slist.node import Node


@dataclass
class ChainReport:
    """Integrity report for one list."""

    # Counts
    node_count: int = 0
    cached_size: int = 0
    recounted_size: Optional[int] = None
    size_consistent: bool = True

    # Chain shape
    has_cycle: bool = False
    cycle_start_index: Optional[int] = None

    # Entries
    none_entries: int = 0
    duplicate_identity_entries: int = 0
    entry_types: Dict[str, int] = field(default_factory=dict)

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def is_healthy(self) -> bool:
        return self.size_consistent and not self.has_cycle


def _walk_chain(head: Optional[Node], report: ChainReport) -> List[Node]:
    """Collect nodes from head until the end or the first revisited node."""
    nodes: List[Node] = []
    position_by_id: Dict[int, int] = {}

    current = head
    while current is not None:
        seen_at = position_by_id.get(id(current))
        if seen_at is not None:
            report.has_cycle = True
            report.cycle_start_index = seen_at
            break
        position_by_id[id(current)] = len(nodes)
        nodes.append(current)
        current = current.next_node

    return nodes


def inspect_chain(lst: SinglyLinkedList) -> ChainReport:
    """
    Inspect the chain behind a list.

    Checks for:
    - Cached counter vs. walked node count vs. size()
    - Cycles in the next_node links
    - None entries and entries stored more than once (same object)

    Returns a ChainReport with counts and warnings.
    """
    report = ChainReport(cached_size=lst.cached_size)

    # =========================================================================
    # 1. CHAIN WALK
    # =========================================================================

    nodes = _walk_chain(lst._head, report)
    report.node_count = len(nodes)

    # size() never terminates on a cyclic chain
    if not report.has_cycle:
        report.recounted_size = lst.size()

    report.size_consistent = (
        report.node_count == report.cached_size
        and (report.recounted_size is None or report.recounted_size == report.cached_size)
        and not report.has_cycle
    )

    # =========================================================================
    # 2. ENTRY INVENTORY
    # =========================================================================

    seen_entries = set()
    for node in nodes:
        if node.entry is None:
            report.none_entries += 1
        else:
            if id(node.entry) in seen_entries:
                report.duplicate_identity_entries += 1
            seen_entries.add(id(node.entry))

        type_name = type(node.entry).__name__
        report.entry_types[type_name] = report.entry_types.get(type_name, 0) + 1

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.has_cycle:
        report.add_warning(
            f"Cycle detected: node {report.node_count - 1} links back to node {report.cycle_start_index}"
        )

    if report.node_count != report.cached_size:
        report.add_warning(
            f"Size counter mismatch: counter says {report.cached_size}, chain has {report.node_count} node(s)"
        )

    if report.none_entries:
        report.add_warning(
            f"None entries: {report.none_entries} node(s) hold None, remove() results are ambiguous for them"
        )

    if report.duplicate_identity_entries:
        report.add_warning(
            f"Shared entries: {report.duplicate_identity_entries} node(s) repeat an object already in the list, "
            f"index_of() only finds the first"
        )

    return report
