"""
Demo: Build a list, run a few positional operations and print the
inspection report and YAML snapshot.
"""

from slist.examples import build_example_list
from slist.inspector import inspect_chain
from slist.serialization import list_to_yaml


def print_report(report):
    """Pretty-print a ChainReport."""
    print()
    print("=" * 70)
    print("CHAIN INSPECTION REPORT")
    print("=" * 70)
    print(f"  Nodes walked:          {report.node_count}")
    print(f"  Cached size:           {report.cached_size}")
    print(f"  Recounted size:        {report.recounted_size}")
    print(f"  Size consistent:       {'YES' if report.size_consistent else 'NO'}")
    print(f"  Has cycle:             {'YES' if report.has_cycle else 'NO'}")
    print(f"  Entry types:           {report.entry_types}")
    print()

    if report.warnings:
        print("WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("NO WARNINGS - chain looks clean!")
    print()


if __name__ == "__main__":
    lst = build_example_list(count=5)
    print(f"Built:          {lst}")

    lst.add_first("front")
    lst.add(3, "middle")
    print(f"After inserts:  {lst}")

    previous = lst.set(1, "replaced")
    print(f"set(1) replaced {previous!r}: {lst}")

    removed = lst.remove(0)
    print(f"remove(0) -> {removed!r}: {lst}")

    target = lst.get(2)
    print(f"index_of({target!r}) -> {lst.index_of(target)}")
    print(f"index_of('absent') -> {lst.index_of('absent')} (size {len(lst)})")

    print_report(inspect_chain(lst))

    print(list_to_yaml(lst))
