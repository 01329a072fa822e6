"""Plot the 3-D surface of a user-supplied function as SVG over HTTP."""

from __future__ import annotations

import argparse
import math
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Callable
from urllib.parse import parse_qs, urlsplit

from chapterkit.eval import Expr, ExprError, _format_g, parse

WIDTH, HEIGHT = 600, 320
CELLS = 100
XYRANGE = 30.0
XYSCALE = WIDTH / 2 / XYRANGE
ZSCALE = HEIGHT * 0.4

_SIN30, _COS30 = 0.5, math.sqrt(3.0 / 4.0)

SurfaceFunc = Callable[[float, float], float]


def corner(f: SurfaceFunc, i: int, j: int) -> tuple[float, float]:
    """Project the corner of grid cell (i, j) onto the SVG canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * _COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * _SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def surface(f: SurfaceFunc) -> str:
    """Return an SVG document plotting f."""
    parts = [
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    ]
    for i in range(CELLS):
        for j in range(CELLS):
            points = (
                corner(f, i + 1, j),
                corner(f, i, j),
                corner(f, i, j + 1),
                corner(f, i + 1, j + 1),
            )
            coords = " ".join(f"{_format_g(px)},{_format_g(py)}" for px, py in points)
            parts.append(f"<polygon points='{coords}'/>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def parse_and_check(text: str) -> Expr:
    """Parse text and make sure it uses only the variables x, y and r."""
    if text == "":
        raise ExprError("empty expression")
    expr = parse(text)
    found: set = set()
    expr.check(found)
    for var in sorted(found, key=lambda v: v.name):
        if var.name not in ("x", "y", "r"):
            raise ExprError(f"undefined variable: {var.name}")
    return expr


def plot(expr_text: str) -> str:
    """Return the SVG surface of the expression, raising ExprError if bad."""
    expr = parse_and_check(expr_text)

    def height(x: float, y: float) -> float:
        return expr.eval({"x": x, "y": y, "r": math.hypot(x, y)})

    return surface(height)


class _PlotHandler(BaseHTTPRequestHandler):
    def _send(self, status: int, content_type: str, body: str) -> None:
        data = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def do_GET(self) -> None:
        url = urlsplit(self.path)
        if url.path != "/plot":
            self._send(404, "text/plain; charset=utf-8", "404 page not found\n")
            return
        query = parse_qs(url.query, keep_blank_values=True)
        text = query.get("expr", [""])[0]
        try:
            svg = plot(text)
        except ExprError as err:
            self._send(400, "text/plain; charset=utf-8", f"bad expr: {err}\n")
            return
        self._send(200, "image/svg+xml", svg)

    def log_message(self, format, *args):
        return None


def make_server(host: str = "localhost", port: int = 8000) -> ThreadingHTTPServer:
    """Create (but do not start) the plotting HTTP server."""
    return ThreadingHTTPServer((host, port), _PlotHandler)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve surface plots at /plot.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)
    with make_server(args.host, args.port) as server:
        server.serve_forever()
    return 0