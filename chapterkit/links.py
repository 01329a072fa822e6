"""Fetch HTML documents and extract the links they contain."""

from __future__ import annotations

from urllib.parse import urljoin

import requests

from chapterkit.htmldoc import Node, NodeType, for_each_node, parse_html

__all__ = ["FetchError", "get_document", "extract"]


class FetchError(Exception):
    """Raised when a document cannot be fetched or parsed."""


def _status_text(resp: requests.Response) -> str:
    return f"{resp.status_code} {resp.reason or ''}".strip()


def get_document(url: str) -> tuple[Node, str]:
    """GET url and parse it as HTML; return the document and the final URL."""
    try:
        resp = requests.get(url)
    except requests.RequestException as err:
        raise FetchError(str(err)) from err
    with resp:
        if resp.status_code != 200:
            raise FetchError(f"getting {url}: {_status_text(resp)}")
        try:
            doc = parse_html(resp.content)
        except Exception as err:
            raise FetchError(f"parsing {url} as HTML: {err}") from err
        return doc, resp.url


def extract(url: str) -> list[str]:
    """Return the links of the document at url, resolved against its URL."""
    doc, base = get_document(url)
    found: list[str] = []

    def visit_node(node: Node) -> None:
        if node.type is NodeType.ELEMENT and node.data == "a":
            for key, value in node.attrs:
                if key != "href":
                    continue
                try:
                    found.append(urljoin(base, value))
                except ValueError:
                    continue

    for_each_node(doc, visit_node)
    return found