"""
Graphviz DOT diagram generator for singly linked lists.

Converts a SinglyLinkedList into Graphviz DOT format for visualization.

Supports two modes:
    - SIMPLE: One box per node showing its entry
    - DETAILED: Adds the index and entry type to each box
"""

import warnings
from enum import Enum
from typing import Dict, Optional

from slist.linked_list import SinglyLinkedList
from slist.node import Node


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"        # Just the entries
    DETAILED = "detailed"    # Include index and type


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    # Escape backslashes first
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _entry_label(entry, limit: int = 30) -> str:
    text = repr(entry)
    # Shorten for readability
    if len(text) > limit:
        text = text[:limit - 3] + "..."
    return text


def generate_dot(lst: SinglyLinkedList, mode: DotMode = DotMode.SIMPLE, max_nodes: int = 50) -> str:
    """
    Generate Graphviz DOT format for a list.

    Args:
        lst: List to visualize
        mode: Visualization mode (SIMPLE, DETAILED)
        max_nodes: Stop drawing after this many nodes

    Returns:
        String containing DOT graph definition
    """
    lines = []

    # Header
    lines.append("digraph linked_list {")
    lines.append("  rankdir=LR;")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    # =========================================================================
    # NODES
    # =========================================================================

    lines.append('  HEAD [shape=plaintext, style="", label="HEAD"];')
    lines.append('  NULL [shape=plaintext, style="", label="NULL"];')

    drawn: Dict[int, str] = {}
    current: Optional[Node] = lst._head
    back_edge: Optional[str] = None
    truncated = False

    while current is not None:
        if id(current) in drawn:
            back_edge = drawn[id(current)]
            warnings.warn(f"Cycle in chain: node links back to {back_edge}", UserWarning)
            break
        if len(drawn) >= max_nodes:
            truncated = True
            warnings.warn(f"Chain truncated after {max_nodes} nodes", UserWarning)
            break

        index = len(drawn)
        node_id = f"n{index}"
        drawn[id(current)] = node_id

        label = _entry_label(current.entry)
        if mode == DotMode.DETAILED:
            label = f"[{index}] {label}\n{type(current.entry).__name__}"

        lines.append(f'  {node_id} [label={_escape_dot_string(label)}];')
        current = current.next_node

    if truncated:
        lines.append('  MORE [shape=plaintext, style="", label="..."];')

    # =========================================================================
    # EDGES (LINKS)
    # =========================================================================

    node_ids = list(drawn.values())
    if node_ids:
        first = node_ids[0]
    elif truncated:
        first = "MORE"
    else:
        first = "NULL"
    lines.append(f"  HEAD -> {first};")

    for from_id, to_id in zip(node_ids, node_ids[1:]):
        lines.append(f"  {from_id} -> {to_id};")

    if node_ids:
        if back_edge is not None:
            tail = back_edge
        elif truncated:
            tail = "MORE"
        else:
            tail = "NULL"
        lines.append(f"  {node_ids[-1]} -> {tail};")

    # Footer
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(lst: SinglyLinkedList, filename: str, mode: DotMode = DotMode.SIMPLE,
                  max_nodes: int = 50) -> None:
    """
    Generate DOT and save to file.

    Args:
        lst: List to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
        max_nodes: Stop drawing after this many nodes
    """
    dot = generate_dot(lst, mode=mode, max_nodes=max_nodes)
    with open(filename, 'w') as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
