"""A small HTML document tree built on html5lib, with traversal helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import IO, Callable, Iterable, Optional, Union
from xml.dom import Node as _DomNode

import html5lib

__all__ = ["NodeType", "Node", "parse_html", "for_each_node", "visit"]


class NodeType(enum.IntEnum):
    ERROR = 0
    TEXT = 1
    DOCUMENT = 2
    ELEMENT = 3
    COMMENT = 4
    DOCTYPE = 5


@dataclass
class Node:
    """One node of a parsed HTML document."""

    type: NodeType
    data: str = ""
    attrs: list[tuple[str, str]] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    @property
    def first_child(self) -> Optional[Node]:
        return self.children[0] if self.children else None


_DOM_TYPES = {
    _DomNode.DOCUMENT_NODE: NodeType.DOCUMENT,
    _DomNode.ELEMENT_NODE: NodeType.ELEMENT,
    _DomNode.TEXT_NODE: NodeType.TEXT,
    _DomNode.CDATA_SECTION_NODE: NodeType.TEXT,
    _DomNode.COMMENT_NODE: NodeType.COMMENT,
    _DomNode.DOCUMENT_TYPE_NODE: NodeType.DOCTYPE,
}


def _convert(dom_node) -> Optional[Node]:
    kind = _DOM_TYPES.get(dom_node.nodeType)
    if kind is None:
        return None
    if kind is NodeType.ELEMENT:
        node = Node(kind, dom_node.tagName, list(dom_node.attributes.items()))
    elif kind in (NodeType.TEXT, NodeType.COMMENT):
        node = Node(kind, dom_node.data)
    elif kind is NodeType.DOCTYPE:
        node = Node(kind, dom_node.name or "")
    else:
        node = Node(kind)
    for child in dom_node.childNodes:
        converted = _convert(child)
        if converted is not None:
            node.children.append(converted)
    return node


def parse_html(source: Union[str, bytes, IO]) -> Node:
    """Parse an HTML document from a string, bytes or a file object."""
    dom = html5lib.parse(source, treebuilder="dom", namespaceHTMLElements=False)
    return _convert(dom)


NodeFunc = Callable[[Node], object]


def for_each_node(
    node: Node, pre: Optional[NodeFunc] = None, post: Optional[NodeFunc] = None
) -> None:
    """Call pre before and post after visiting the children of each node."""
    if pre is not None:
        pre(node)
    for child in node.children:
        for_each_node(child, pre, post)
    if post is not None:
        post(node)


def visit(links: Optional[Iterable[str]], node: Node) -> list[str]:
    """Return links extended by every anchor href found under node."""
    found = list(links or [])

    def collect(n: Node) -> None:
        if n.type is NodeType.ELEMENT and n.data == "a":
            found.extend(value for key, value in n.attrs if key == "href")

    for_each_node(node, collect)
    return found