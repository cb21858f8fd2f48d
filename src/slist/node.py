"""
Link-cell of the singly linked list.

A Node is a plain data holder:
    - entry: the element value
    - next_node: the successor, or None at the end of the chain

ARCHITECTURAL RULE:
    Nodes have no behavior. Only the owning list rewires them.
    Each node is referenced by exactly one predecessor (or by the
    list itself when it is the head), so the chain has no cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class Node:
    """
    One link-cell.

    Properties:
        entry:
            The element value (any type, compared by identity during search)

        next_node:
            Successor node, or None if this is the last node

    Equality is identity: two nodes holding equal entries are still
    different cells.
    """

    entry: Any
    next_node: Optional[Node] = None

    def __repr__(self) -> str:
        # The successor is summarised so long chains don't recurse.
        tail = "..." if self.next_node is not None else "None"
        return f"Node(entry={self.entry!r}, next_node={tail})"
