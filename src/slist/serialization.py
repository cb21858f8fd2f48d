"""
Snapshot export for SinglyLinkedList instances.

Produces an explicit dict representation of the chain and renders it as
JSON or YAML. Export only: building a list back from a snapshot would be
bulk construction, which the list does not offer.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Set

import yaml

from slist.linked_list import SinglyLinkedList
from slist.node import Node

_SCALARS = (type(None), bool, int, float, str)


def entry_to_dict(value: Any) -> Any:
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, (list, tuple)):
        return [entry_to_dict(v) for v in value]
    if isinstance(value, dict):
        return {str(k): entry_to_dict(v) for k, v in value.items()}
    return {"type": "repr", "value": repr(value)}


def node_to_dict(node: Node, index: int) -> Dict[str, Any]:
    if not isinstance(node, Node):
        raise TypeError(f"Unsupported node type: {type(node)}")
    return {
        "index": index,
        "entry": entry_to_dict(node.entry),
        "has_next": node.next_node is not None,
    }


def list_to_dict(lst: SinglyLinkedList) -> Dict[str, Any]:
    """
    Snapshot the chain as a dict.

    Raises:
        TypeError: if lst is not a SinglyLinkedList
        ValueError: if the chain links back to a node already visited
    """
    if not isinstance(lst, SinglyLinkedList):
        raise TypeError(f"Unsupported list type: {type(lst)}")
    nodes: List[Dict[str, Any]] = []
    seen: Set[int] = set()
    current = lst._head
    while current is not None:
        if id(current) in seen:
            raise ValueError(f"Cycle in chain after node {len(nodes) - 1}")
        seen.add(id(current))
        nodes.append(node_to_dict(current, len(nodes)))
        current = current.next_node
    return {"size": lst.cached_size, "nodes": nodes}


def list_to_json(lst: SinglyLinkedList, indent: int | None = None) -> str:
    return json.dumps(list_to_dict(lst), sort_keys=True, indent=indent)


def list_to_yaml(lst: SinglyLinkedList) -> str:
    return yaml.safe_dump(list_to_dict(lst), sort_keys=False)
