import math

import pytest

from tangent_router.domain.entities.geography import Point, Segment
from tangent_router.domain.geometry import (
    convex_vertices,
    distance,
    distance_point_to_line,
    half_plane_side,
    near_segment,
    point_in_convex_polygon,
    segment_intersection,
    segment_polygon_intersections,
    signed_area,
    winding,
)

SQUARE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
SQUARE_CW = list(reversed(SQUARE))


def seg(ax, ay, bx, by) -> Segment:
    return Segment(Point(ax, ay), Point(bx, by))


# ---------- primitives


def test_half_plane_side_boundary_is_inclusive():
    a, b = Point(0, 0), Point(1, 0)
    assert half_plane_side(a, b, Point(3, 2))
    assert half_plane_side(a, b, Point(0, 5))  # on the perpendicular through a
    assert not half_plane_side(a, b, Point(-1, 5))


def test_distance_and_distance_to_line():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0
    assert abs(distance_point_to_line(Point(0, 0), Point(4, 0), Point(2, 3)) - 3.0) < 1e-12
    # infinite line, not segment: beyond the end still measures perpendicular distance
    assert abs(distance_point_to_line(Point(0, 0), Point(1, 1), Point(10, 0)) - 10 / math.sqrt(2)) < 1e-9


def test_distance_to_degenerate_line_falls_back_to_point_distance():
    assert distance_point_to_line(Point(1, 1), Point(1, 1), Point(4, 5)) == 5.0


# ---------- segment / segment


def test_segment_intersection_crossing_and_symmetric():
    s0, s1 = seg(0, 0, 4, 4), seg(0, 4, 4, 0)
    assert segment_intersection(s0, s1) == Point(2, 2)
    assert segment_intersection(s1, s0) == segment_intersection(s0, s1)


def test_segment_intersection_outside_extent_is_none():
    # lines meet at (3, 3), beyond the end of the first segment
    assert segment_intersection(seg(0, 0, 1, 1), seg(3, 0, 3, 5)) is None
    assert segment_intersection(seg(3, 0, 3, 5), seg(0, 0, 1, 1)) is None


def test_segment_intersection_parallel_and_collinear_are_none():
    assert segment_intersection(seg(0, 0, 1, 0), seg(0, 1, 1, 1)) is None
    assert segment_intersection(seg(0, 0, 2, 0), seg(1, 0, 3, 0)) is None


def test_segment_intersection_at_shared_endpoint():
    assert segment_intersection(seg(0, 0, 2, 0), seg(2, -1, 2, 1)) == Point(2, 0)


# ---------- segment / polygon


def test_segment_outside_polygon_has_no_intersections():
    assert segment_polygon_intersections(seg(5, 5, 6, 7), SQUARE) == []


def test_segment_leaving_polygon_crosses_one_edge():
    assert segment_polygon_intersections(seg(2, 2, 2, 6), SQUARE) == [Point(2, 4)]


def test_transversal_segment_crosses_two_edges():
    hits = segment_polygon_intersections(seg(2, -1, 2, 5), SQUARE)
    assert set(hits) == {Point(2, 0), Point(2, 4)}


def test_intersections_through_vertices_are_deduplicated():
    hits = segment_polygon_intersections(seg(-1, -1, 5, 5), SQUARE)
    assert len(hits) == 2
    assert set(hits) == {Point(0, 0), Point(4, 4)}


def test_empty_polygon_has_no_intersections():
    assert segment_polygon_intersections(seg(0, 0, 1, 1), []) == []


# ---------- convexity / winding


def test_signed_area_and_winding():
    assert signed_area(SQUARE) == 16.0
    assert signed_area(SQUARE_CW) == -16.0
    assert winding(SQUARE) == 1 and winding(SQUARE_CW) == -1
    assert signed_area([Point(0, 0), Point(1, 1)]) == 0.0


def test_square_has_four_convex_vertices():
    out = convex_vertices(SQUARE)
    assert len(out) == 4
    assert set(out) == set(SQUARE)
    # walk starts at the second vertex and wraps to the first
    assert out[0] == Point(4, 0) and out[-1] == Point(0, 0)


def test_clockwise_square_gives_same_convex_vertices():
    assert set(convex_vertices(SQUARE_CW)) == set(SQUARE)


def test_reflex_vertex_is_excluded():
    L = [Point(0, 0), Point(4, 0), Point(4, 2), Point(2, 2), Point(2, 4), Point(0, 4)]
    out = convex_vertices(L)
    assert Point(2, 2) not in out
    assert len(out) == 5
    assert set(convex_vertices(list(reversed(L)))) == set(out)


def test_collinear_vertex_counts_as_convex():
    poly = [Point(0, 0), Point(2, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
    out = convex_vertices(poly)
    assert Point(2, 0) in out
    assert len(out) == 5


@pytest.mark.parametrize("poly", [[], [Point(0, 0)], [Point(0, 0), Point(1, 0)]])
def test_too_few_vertices_have_no_convex_vertices(poly):
    assert convex_vertices(poly) == []


# ---------- containment


@pytest.mark.parametrize("poly", [SQUARE, SQUARE_CW])
def test_point_in_convex_polygon(poly):
    assert point_in_convex_polygon(Point(2, 2), poly)
    assert not point_in_convex_polygon(Point(5, 5), poly)
    assert point_in_convex_polygon(Point(0, 0), poly)  # boundary inclusive
    assert point_in_convex_polygon(Point(4, 2), poly)


def test_point_in_empty_polygon_is_false():
    assert not point_in_convex_polygon(Point(0, 0), [])


# ---------- near segment


def test_near_segment():
    s = seg(0, 0, 10, 0)
    assert near_segment(Point(5, 0.4), s)
    assert not near_segment(Point(5, 0.6), s)
    assert not near_segment(Point(11, 0), s)  # on the line but past the end
    assert near_segment(Point(10, 0), s)
