#!/usr/bin/env python3
"""
Demo: Generate Graphviz DOT diagrams from a list.

Shows both visualization modes (SIMPLE, DETAILED).
"""

from slist.examples import build_example_list
from slist.backends import generate_dot, save_dot_file, DotMode


def main():
    lst = build_example_list(count=4)

    print("=" * 80)
    print("DOT GENERATOR DEMO")
    print("=" * 80)

    for mode in [DotMode.SIMPLE, DotMode.DETAILED]:
        print(f"\n{mode.value.upper()} MODE:")
        print("-" * 80)

        print(generate_dot(lst, mode=mode))

        filename = f"list_{mode.value}.dot"
        save_dot_file(lst, filename, mode=mode)
        print(f"\nSaved to: {filename}")

    print("\n" + "=" * 80)
    print("To visualize the diagrams:")
    print("  dot -Tpng list_simple.dot -o list_simple.png")
    print("  dot -Tpng list_detailed.dot -o list_detailed.png")
    print("=" * 80)


if __name__ == "__main__":
    main()
