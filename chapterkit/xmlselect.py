"""Print the text of selected elements of an XML document."""

from __future__ import annotations

import argparse
import sys
import xml.sax
from typing import IO, Iterable, Iterator, Sequence, Union
from xml.sax.handler import ContentHandler, feature_external_ges

__all__ = ["contains_all", "select", "main"]

Source = Union[str, bytes, IO]


def contains_all(x: Sequence[str], y: Sequence[str]) -> bool:
    """Report whether x contains the elements of y, in order."""
    remaining = iter(x)
    return all(any(a == b for a in remaining) for b in y)


class _Collector(ContentHandler):
    def __init__(self) -> None:
        super().__init__()
        self.stack: list[str] = []
        self._text: list[str] = []
        self.events: list[tuple[tuple[str, ...], str]] = []

    def _flush(self) -> None:
        if self._text:
            self.events.append((tuple(self.stack), "".join(self._text)))
            self._text.clear()

    def startElement(self, name, attrs):
        self._flush()
        self.stack.append(name.rpartition(":")[2])

    def endElement(self, name):
        self._flush()
        self.stack.pop()

    def characters(self, content):
        self._text.append(content)

    def endDocument(self):
        self._flush()

    def drain(self, names: Sequence[str]) -> Iterator[tuple[tuple[str, ...], str]]:
        events, self.events = self.events, []
        for stack, text in events:
            if contains_all(stack, names):
                yield stack, text


def _chunks(source: Source) -> Iterator[bytes]:
    if isinstance(source, str):
        yield source.encode("utf-8")
        return
    if isinstance(source, (bytes, bytearray)):
        yield bytes(source)
        return
    while chunk := source.read(65536):
        yield chunk.encode("utf-8") if isinstance(chunk, str) else chunk


def select(
    source: Source, names: Iterable[str]
) -> Iterator[tuple[tuple[str, ...], str]]:
    """Yield (element path, text) for each text run inside the named elements.

    The path holds local element names from the root down. A text run is
    selected when the path contains all of names, in order.
    Raises xml.sax.SAXParseException on malformed input.
    """
    wanted = list(names)
    handler = _Collector()
    parser = xml.sax.make_parser()
    parser.setFeature(feature_external_ges, False)
    parser.setContentHandler(handler)
    for chunk in _chunks(source):
        parser.feed(chunk)
        yield from handler.drain(wanted)
    parser.close()
    yield from handler.drain(wanted)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print text of XML elements nested within the named elements."
    )
    parser.add_argument("names", nargs="*")
    args = parser.parse_args(argv)
    try:
        for stack, text in select(sys.stdin.buffer, args.names):
            print(f"{' '.join(stack)}: {text}")
    except xml.sax.SAXException as err:
        print(f"xmlselect: {err}", file=sys.stderr)
        return 1
    return 0