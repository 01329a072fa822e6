"""Simple plane geometry: points, paths and coloured points."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point:
    x: float
    y: float

    def distance(self, q: Point) -> float:
        """Return the distance from this point to q."""
        return math.hypot(q.x - self.x, q.y - self.y)

    def scale_by(self, factor: float) -> None:
        """Scale both coordinates in place."""
        self.x *= factor
        self.y *= factor


def distance(p: Point, q: Point) -> float:
    """Return the distance between p and q."""
    return math.hypot(q.x - p.x, q.y - p.y)


class Path(list):
    """A journey connecting points with straight lines."""

    def distance(self) -> float:
        """Return the distance travelled along the path."""
        return sum(a.distance(b) for a, b in zip(self, self[1:]))


@dataclass(frozen=True)
class RGBA:
    r: int
    g: int
    b: int
    a: int


@dataclass
class ColoredPoint:
    """A point with a colour; the point may be shared with others."""

    point: Point
    color: RGBA

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    def distance(self, q: Point) -> float:
        return self.point.distance(q)

    def scale_by(self, factor: float) -> None:
        self.point.scale_by(factor)