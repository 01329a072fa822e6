"""A small e-commerce HTTP server with /list and /price endpoints."""

from __future__ import annotations

import argparse
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Mapping
from urllib.parse import parse_qs, urlsplit

__all__ = [
    "format_dollars",
    "list_items",
    "price",
    "handle",
    "make_server",
    "main",
]

DEFAULT_DB = {"shoes": 50.0, "socks": 5.0}

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _quote(text: str) -> str:
    out = []
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        elif ord(ch) <= 0xFF:
            out.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(out) + '"'


def format_dollars(amount: float) -> str:
    """Format an amount of dollars with two decimals, e.g. "$5.00"."""
    return f"${amount:.2f}"


def list_items(db: Mapping[str, float]) -> str:
    """Return one "item: $price" line for every item in db."""
    return "".join(f"{item}: {format_dollars(cost)}\n" for item, cost in db.items())


def price(db: Mapping[str, float], item: str) -> tuple[int, str]:
    """Return the HTTP status and body for a price query about item."""
    if item not in db:
        return 404, f"no such item: {_quote(item)}\n"
    return 200, f"{format_dollars(db[item])}\n"


def handle(db: Mapping[str, float], path: str, query: str = "") -> tuple[int, str]:
    """Route a request for path with the raw query string; return status and body."""
    if path == "/list":
        return 200, list_items(db)
    if path == "/price":
        values = parse_qs(query, keep_blank_values=True).get("item", [""])
        return price(db, values[0])
    url = path + (f"?{query}" if query else "")
    return 404, f"no such page: {url}\n"


class _ShopHandler(BaseHTTPRequestHandler):
    db: Mapping[str, float] = {}

    def do_GET(self) -> None:
        parts = urlsplit(self.path)
        status, body = handle(self.db, parts.path, parts.query)
        data = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, format, *args):
        return None


def make_server(
    db: Mapping[str, float], host: str = "localhost", port: int = 8000
) -> ThreadingHTTPServer:
    """Create (but do not start) a server answering from db."""
    handler = type("ShopHandler", (_ShopHandler,), {"db": db})
    return ThreadingHTTPServer((host, port), handler)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve a tiny price list.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)
    with make_server(dict(DEFAULT_DB), args.host, args.port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0