"""
Singly Linked List

The list owns a forward-only chain of Nodes starting at `head` and keeps a
counter of live nodes. Every positional operation resolves its target by
walking the chain from the head (see `_get_node`), so walking off the end is
handled in one place.

Efficiency:
    add_first / remove_first:       O(1)
    get / set / add / remove:       O(index)
    append / size / index_of:       O(n)

BOUNDARY POLICY:
    - add(index, value) accepts 0 <= index <= size; index == size appends.
    - remove(0) removes the head.
    - index_of() reports a miss as the number of nodes walked (the size),
      not as -1.

INVARIANT:
    The cached counter equals the number of nodes reachable from head.
    size() recounts by traversal and must agree with it.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from slist.node import Node


class IndexOutOfRangeError(IndexError):
    """Raised when a positional index falls outside the list."""

    def __init__(self, index: int):
        super().__init__(str(index))
        self.index = index


class SinglyLinkedList:
    """
    Generic singly linked list.

    Elements are opaque: the only capability required of them is identity,
    used by index_of(). The list exposes positional operations only;
    nodes never leave the list through the public API.
    The inspector, serializers and renderers in this package read `_head`
    directly; they do not rewire nodes.
    """

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._current_size = 0

    @property
    def cached_size(self) -> int:
        """Counter maintained by the mutating operations."""
        return self._current_size

    # =========================================================================
    # INTERNAL CHAIN PRIMITIVES
    # =========================================================================

    def _add_after(self, node: Node, value: Any) -> None:
        """Link a new node holding `value` right after `node`."""
        node.next_node = Node(value, node.next_node)
        self._current_size += 1

    def _remove_after(self, node: Node) -> Any:
        """
        Unlink the successor of `node`.

        Returns:
            The removed entry, or None if `node` is the last node
            (nothing is changed in that case)
        """
        removed = node.next_node
        if removed is None:
            return None

        node.next_node = removed.next_node
        removed.next_node = None
        self._current_size -= 1
        return removed.entry

    def _get_node(self, index: int) -> Optional[Node]:
        """
        Walk `index` links from the head.

        Stops early and returns None when the chain ends first.
        A negative index walks zero links and returns the head.
        """
        current = self._head
        i = 0
        while i < index and current is not None:
            current = current.next_node
            i += 1
        return current

    def _iter_nodes(self) -> Iterator[Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next_node

    def _check_index(self, index: int, upper: int) -> None:
        if index < 0 or index >= upper:
            raise IndexOutOfRangeError(index)

    # =========================================================================
    # PUBLIC OPERATIONS
    # =========================================================================

    def add_first(self, value: Any) -> None:
        """Insert `value` as the new head. Always succeeds."""
        self._head = Node(value, self._head)
        self._current_size += 1

    def remove_first(self) -> Any:
        """
        Remove the head and return its entry.

        Returns:
            The removed entry, or None if the list is empty
        """
        if self._head is None:
            return None

        removed = self._head
        self._head = removed.next_node
        removed.next_node = None
        self._current_size -= 1
        return removed.entry

    def get(self, index: int) -> Any:
        """
        Return the entry at `index`.

        Raises:
            IndexOutOfRangeError: if index is not in [0, size)
        """
        self._check_index(index, self._current_size)
        return self._get_node(index).entry

    def set(self, index: int, value: Any) -> Any:
        """
        Overwrite the entry at `index`.

        Args:
            index: Position of the node to update
            value: New entry

        Returns:
            The entry that was replaced

        Raises:
            IndexOutOfRangeError: if index is not in [0, size)
        """
        self._check_index(index, self._current_size)
        node = self._get_node(index)
        previous = node.entry
        node.entry = value
        return previous

    def add(self, index: int, value: Any) -> None:
        """
        Insert `value` so that it ends up at position `index`.

        The accepted range is [0, size], one wider than set()/get():
        inserting at `size` appends. A strict [0, size) bound would make
        append() impossible.

        Raises:
            IndexOutOfRangeError: if index is not in [0, size]
        """
        self._check_index(index, self._current_size + 1)

        if index == 0:
            self.add_first(value)
        else:
            self._add_after(self._get_node(index - 1), value)

    def append(self, value: Any) -> bool:
        """Add `value` at the end. Returns True on success."""
        self.add(self._current_size, value)
        return True

    def size(self) -> int:
        """Count the nodes by walking the whole chain."""
        nodes_counted = 0
        for _ in self._iter_nodes():
            nodes_counted += 1
        return nodes_counted

    def index_of(self, target: Any) -> int:
        """
        Position of the first entry that *is* `target`.

        Comparison is by identity, not equality. On a miss the result is
        the number of nodes walked, which equals the size of the list
        (0 for an empty list). Callers test `result < len(lst)`.
        """
        position = 0
        current = self._head
        while current is not None and current.entry is not target:
            position += 1
            current = current.next_node
        return position

    def remove(self, index: int) -> Any:
        """
        Remove the node at `index` and return its entry.

        Returns:
            The removed entry, or None if there is no node at `index`
            (negative or past the end); the list is unchanged then
        """
        if index == 0:
            return self.remove_first()
        if index < 0:
            return None

        anchor = self._get_node(index - 1)
        if anchor is None:
            return None
        return self._remove_after(anchor)

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        entries = ", ".join(repr(node.entry) for node in self._iter_nodes())
        return f"SinglyLinkedList([{entries}])"
