from collections.abc import Sequence
from dataclasses import dataclass


# Core geometry types used by the planner
@dataclass(frozen=True)
class Point:
    x: float  # grid units
    y: float


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point


# Closed loop: the last vertex connects back to the first
Polygon = Sequence[Point]

Coord = Point | tuple[float, float]


def to_point(p: Coord) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


def to_polygon(pts: Sequence[Coord]) -> tuple[Point, ...]:
    return tuple(to_point(p) for p in pts)
