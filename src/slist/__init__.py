"""
Singly Linked List Package

A generic, forward-only linked list with positional access, insertion,
removal and identity search.

STRUCTURE:
----------
    node         - the link-cell holding one entry
    linked_list  - the list and its positional operations
    inspector    - read-only integrity reports
    serialization - snapshot export (dict/JSON/YAML)
    backends     - visual output (Graphviz DOT)

The list owns its chain. Nothing outside the list mutates nodes.
"""

__version__ = "0.1.0"
