"""Print the title of HTML documents fetched by URL."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator

import requests

from chapterkit.htmldoc import Node, NodeType, for_each_node, parse_html

__all__ = ["TitleError", "titles", "sole_title", "fetch_html", "title", "main"]


class TitleError(Exception):
    """Raised when a document or its title cannot be obtained."""


def titles(doc: Node) -> Iterator[str]:
    """Yield the text of every non-empty title element in doc."""
    found: list[str] = []

    def visit_node(node: Node) -> None:
        if (
            node.type is NodeType.ELEMENT
            and node.data == "title"
            and node.first_child is not None
        ):
            found.append(node.first_child.data)

    for_each_node(doc, visit_node)
    yield from found


def sole_title(doc: Node) -> str:
    """Return the title of doc, raising TitleError unless there is exactly one."""
    found = ""
    for text in titles(doc):
        if found:
            raise TitleError("multiple title elements")
        found = text
    if not found:
        raise TitleError("no title element")
    return found


def fetch_html(url: str) -> Node:
    """GET url and parse it, raising TitleError unless it is HTML."""
    try:
        resp = requests.get(url)
    except requests.RequestException as err:
        raise TitleError(str(err)) from err
    with resp:
        ct = resp.headers.get("Content-Type", "")
        if ct != "text/html" and not ct.startswith("text/html;"):
            raise TitleError(f"{url} has type {ct}, not text/html")
        try:
            return parse_html(resp.content)
        except Exception as err:
            raise TitleError(f"parsing {url} as HTML: {err}") from err


def title(url: str) -> str:
    """Return the sole title of the document at url."""
    return sole_title(fetch_html(url))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the titles of HTML documents.")
    parser.add_argument("urls", nargs="*")
    parser.add_argument(
        "--all", action="store_true", help="print every title instead of the sole one"
    )
    args = parser.parse_args(argv)
    for url in args.urls:
        try:
            if args.all:
                for text in titles(fetch_html(url)):
                    print(text)
            else:
                print(title(url))
        except TitleError as err:
            print(f"title: {err}", file=sys.stderr)
    return 0