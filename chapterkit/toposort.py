"""Print the courses of a prerequisite graph in topological order."""

from __future__ import annotations

import argparse
from typing import Iterable, Mapping, Sequence

__all__ = ["PREREQS", "topo_sort", "main"]

PREREQS: dict[str, list[str]] = {
    "algorithms": ["data structures"],
    "calculus": ["linear algebra"],
    "compilers": [
        "data structures",
        "formal languages",
        "computer organization",
    ],
    "data structures": ["discrete math"],
    "databases": ["data structures"],
    "discrete math": ["intro to programming"],
    "formal languages": ["discrete math"],
    "networks": ["operating systems"],
    "operating systems": ["data structures", "computer organization"],
    "programming languages": ["data structures", "computer organization"],
}


def topo_sort(prereqs: Mapping[str, Sequence[str]]) -> list[str]:
    """Return every item of prereqs so that each follows its prerequisites.

    Keys are visited in sorted order, so the result is deterministic.
    Cycles are not reported; each item appears exactly once.
    """
    order: list[str] = []
    seen: set[str] = set()

    def visit_all(items: Iterable[str]) -> None:
        for item in items:
            if item not in seen:
                seen.add(item)
                visit_all(prereqs.get(item, ()))
                order.append(item)

    visit_all(sorted(prereqs))
    return order


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print computer science courses in prerequisite order."
    )
    parser.parse_args(argv)
    for i, course in enumerate(topo_sort(PREREQS), start=1):
        print(f"{i}:\t{course}")
    return 0