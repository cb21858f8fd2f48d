"""
Tests for the Chain Inspector.

Tests verify that the inspector correctly:
    - Counts nodes and compares them with the cached counter
    - Detects cycles without hanging
    - Reports None and shared entries
    - Leaves the list untouched
"""

from slist.linked_list import SinglyLinkedList
from slist.inspector import inspect_chain


def build_list(*entries):
    lst = SinglyLinkedList()
    for entry in entries:
        lst.append(entry)
    return lst


class TestHealthyChains:
    """Test lists built only through their own operations."""

    def test_healthy_list(self):
        """A list built through its own operations should be clean."""
        lst = build_list(object(), object(), "text")

        report = inspect_chain(lst)

        assert report.node_count == 3
        assert report.cached_size == 3
        assert report.recounted_size == 3
        assert report.size_consistent
        assert not report.has_cycle
        assert report.is_healthy
        assert report.warnings == []
        assert report.entry_types == {"object": 2, "str": 1}

    def test_empty_list(self):
        """An empty list is healthy with zero counts."""
        report = inspect_chain(SinglyLinkedList())

        assert report.node_count == 0
        assert report.recounted_size == 0
        assert report.is_healthy
        assert report.warnings == []

    def test_inspection_does_not_modify_list(self):
        """The inspector is read-only."""
        entries = [object(), object()]
        lst = build_list(*entries)

        inspect_chain(lst)

        assert lst.size() == 2
        assert [lst.get(0), lst.get(1)] == entries


class TestCorruptedChains:
    """Test chains rewired behind the list's back."""

    def test_detects_cycle(self):
        """A chain whose tail links back should be reported, not walked forever."""
        lst = build_list(object(), object(), object())
        lst._get_node(2).next_node = lst._head

        report = inspect_chain(lst)

        assert report.has_cycle
        assert report.cycle_start_index == 0
        assert report.node_count == 3
        assert report.recounted_size is None
        assert not report.size_consistent
        assert not report.is_healthy
        assert "Cycle detected: node 2 links back to node 0" in report.warnings

    def test_detects_counter_mismatch(self):
        """Cutting the chain leaves the counter stale."""
        lst = build_list(object(), object(), object())
        lst._head.next_node = None

        report = inspect_chain(lst)

        assert report.node_count == 1
        assert report.recounted_size == 1
        assert report.cached_size == 3
        assert not report.size_consistent
        assert any("Size counter mismatch" in w for w in report.warnings)


class TestEntryInventory:
    """Test reporting on stored entries."""

    def test_reports_none_entries(self):
        """None entries are counted and flagged but not unhealthy."""
        lst = build_list(object(), None, None)

        report = inspect_chain(lst)

        assert report.none_entries == 2
        assert report.duplicate_identity_entries == 0
        assert any("None entries" in w for w in report.warnings)
        assert report.is_healthy

    def test_reports_shared_entries(self):
        """The same object stored twice is flagged."""
        shared = object()
        lst = build_list(shared, object(), shared)

        report = inspect_chain(lst)

        assert report.duplicate_identity_entries == 1
        assert any("Shared entries" in w for w in report.warnings)

    def test_warnings_are_not_duplicated(self):
        """add_warning ignores repeats."""
        report = inspect_chain(build_list(object()))
        report.add_warning("same")
        report.add_warning("same")
        assert report.warnings == ["same"]
