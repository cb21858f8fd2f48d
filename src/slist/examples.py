"""
Example list builder used by the demos and tests.

Builds a list of string entries "item0", "item1", ... by appending, so the
resulting order matches the insertion order.
"""
from slist.linked_list import SinglyLinkedList


def build_example_list(count: int = 5, prefix: str = "item") -> SinglyLinkedList:
    lst = SinglyLinkedList()
    for i in range(count):
        lst.append(f"{prefix}{i}")
    return lst
