# tangent_router/domain/geometry.py
import math

import numpy as np

from tangent_router.domain.entities.geography import Point, Polygon, Segment


def _cross(o: Point, a: Point, b: Point) -> float:
    """z component of (a - o) x (b - o)."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _closed(polygon: Polygon) -> list[Point]:
    pts = list(polygon)
    return pts + pts[:1]


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def half_plane_side(p1: Point, p2: Point, probe: Point) -> bool:
    """True if probe lies on the forward side of the perpendicular through p1 (towards p2)."""
    dot = (p2.x - p1.x) * (probe.x - p1.x) + (p2.y - p1.y) * (probe.y - p1.y)
    return dot >= 0


def within_extent(seg: Segment, p: Point) -> bool:
    return half_plane_side(seg.start, seg.end, p) and half_plane_side(seg.end, seg.start, p)


def segment_intersection(s0: Segment, s1: Segment) -> Point | None:
    A, B, C, D = s0.start, s0.end, s1.start, s1.end

    # line AB as a1*x + b1*y = c1
    a1 = B.y - A.y
    b1 = A.x - B.x
    c1 = a1 * A.x + b1 * A.y

    # line CD as a2*x + b2*y = c2
    a2 = D.y - C.y
    b2 = C.x - D.x
    c2 = a2 * C.x + b2 * C.y

    det = a1 * b2 - a2 * b1
    if det == 0:
        return None  # parallel or collinear

    p = Point((b2 * c1 - b1 * c2) / det, (a1 * c2 - a2 * c1) / det)
    if within_extent(s0, p) and within_extent(s1, p):
        return p
    return None


def segment_polygon_intersections(seg: Segment, polygon: Polygon) -> list[Point]:
    if len(polygon) == 0:
        return []
    loop = _closed(polygon)
    out: list[Point] = []
    for p0, p1 in zip(loop, loop[1:]):
        hit = segment_intersection(seg, Segment(p0, p1))
        if hit is not None and hit not in out:
            out.append(hit)
    return out


def signed_area(polygon: Polygon) -> float:
    """Shoelace area; positive for counter-clockwise vertex order."""
    if len(polygon) < 3:
        return 0.0
    xy = np.array([(p.x, p.y) for p in polygon], dtype=float)
    x, y = xy[:, 0], xy[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def winding(polygon: Polygon) -> int:
    # degenerate (zero area) polygons keep the counter-clockwise convention
    return -1 if signed_area(polygon) < 0 else 1


def convex_vertices(polygon: Polygon) -> list[Point]:
    """
    Vertices whose interior angle is non-reflex under the polygon's winding.
    Collinear triples count as convex. Walk order: vertex 1..n-1, then vertex 0.
    """
    if len(polygon) < 3:
        return []
    sign = winding(polygon)
    pts = list(polygon) + list(polygon[:2])
    out = []
    for p0, p1, p2 in zip(pts, pts[1:], pts[2:]):
        if sign * _cross(p0, p1, p2) >= 0:
            out.append(p1)
    return out


def point_in_convex_polygon(point: Point, polygon: Polygon) -> bool:
    """Boundary-inclusive containment test for a convex polygon of either winding."""
    if len(polygon) == 0:
        return False
    sign = winding(polygon)
    loop = _closed(polygon)
    for a, b in zip(loop, loop[1:]):
        if sign * _cross(a, b, point) < 0:
            return False
    return True


def distance_point_to_line(p1: Point, p2: Point, point: Point) -> float:
    a = p1.y - p2.y
    b = p2.x - p1.x
    norm = math.hypot(a, b)
    if norm == 0:
        return distance(p1, point)
    return abs(a * point.x + b * point.y + p1.x * p2.y - p2.x * p1.y) / norm


def near_segment(point: Point, seg: Segment, tolerance: float = 0.5) -> bool:
    """Point is approximately on seg: close to its line and inside its extents."""
    if distance_point_to_line(seg.start, seg.end, point) >= tolerance:
        return False
    return within_extent(seg, point)
