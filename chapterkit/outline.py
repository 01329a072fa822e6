"""Print the outline of an HTML document tree."""

from __future__ import annotations

import argparse
import sys

import requests

from chapterkit.htmldoc import Node, NodeType, for_each_node, parse_html

__all__ = ["outline_paths", "outline_tags", "outline_url", "main"]


def outline_paths(doc: Node) -> list[list[str]]:
    """Return the stack of element names leading to each element, in order."""
    paths: list[list[str]] = []

    def walk(stack: list[str], node: Node) -> None:
        if node.type is NodeType.ELEMENT:
            stack = stack + [node.data]
            paths.append(stack)
        for child in node.children:
            walk(stack, child)

    walk([], doc)
    return paths


def outline_tags(doc: Node) -> list[str]:
    """Return indented start and end tags for every element of doc."""
    lines: list[str] = []
    depth = 0

    def start(node: Node) -> None:
        nonlocal depth
        if node.type is NodeType.ELEMENT:
            lines.append(f"{' ' * (depth * 2)}<{node.data}>")
            depth += 1

    def end(node: Node) -> None:
        nonlocal depth
        if node.type is NodeType.ELEMENT:
            depth -= 1
            lines.append(f"{' ' * (depth * 2)}</{node.data}>")

    for_each_node(doc, start, end)
    return lines


def outline_url(url: str) -> list[str]:
    """Fetch url and return the tag outline of its document."""
    with requests.get(url) as resp:
        doc = parse_html(resp.content)
    return outline_tags(doc)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Outline HTML from URLs, or from standard input if none are given."
    )
    parser.add_argument("urls", nargs="*")
    args = parser.parse_args(argv)

    if not args.urls:
        doc = parse_html(sys.stdin.read())
        for path in outline_paths(doc):
            print("[" + " ".join(path) + "]")
        return 0

    for url in args.urls:
        try:
            lines = outline_url(url)
        except requests.RequestException as err:
            print(f"outline: {err}", file=sys.stderr)
            continue
        for line in lines:
            print(line)
    return 0