"""A mapping from string keys to lists of values, as in URL query strings."""

from __future__ import annotations

import argparse

__all__ = ["Values", "main"]


class Values(dict):
    """Map each key to a list of string values."""

    def first(self, key: str) -> str:
        """Return the first value for key, or "" if there are none."""
        values = super().get(key)
        return values[0] if values else ""

    def add(self, key: str, value: str) -> None:
        """Append value to the values of key."""
        self.setdefault(key, []).append(value)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate multi-valued maps.")
    parser.parse_args(argv)
    m = Values({"lang": ["en"]})
    m.add("item", "1")
    m.add("item", "2")

    print(m.first("lang"))
    print(m.first("q"))
    print(m.first("item"))
    print("[" + " ".join(m["item"]) + "]")

    print(Values().first("item"))
    return 0