import math

from tangent_router.domain.entities.geography import Point
from tangent_router.domain.entities.route import Route
from tangent_router.domain.selection import extract_routes, route_length, select_path

A, B, C, D = Point(0, 0), Point(0, 10), Point(5, 5), Point(10, 10)


def test_extract_routes_one_sequence_per_leaf():
    tree = Route(A, [Route(B, [Route(D)]), Route(C, [Route(D)]), Route(Point(1, 1))])
    routes = extract_routes(tree)
    assert routes == [[A, B, D], [A, C, D], [A, Point(1, 1)]]


def test_extract_routes_single_node_and_empty_tree():
    assert extract_routes(Route(A)) == [[A]]
    assert extract_routes(Route()) == []


def test_extract_routes_sequences_are_independent():
    tree = Route(A, [Route(B), Route(C)])
    r1, r2 = extract_routes(tree)
    r1.append(D)
    assert r2 == [A, C]


def test_route_length():
    assert route_length([]) == 0.0
    assert route_length([A]) == 0.0
    assert abs(route_length([A, B, D]) - 20.0) < 1e-12
    assert abs(route_length([A, C, D]) - 2 * math.hypot(5, 5)) < 1e-12


def test_select_path_picks_shortest_reaching_destination():
    routes = [[A, B, D], [A, C, D], [A, Point(9, 9)]]
    assert select_path(routes, D) == [A, C, D]


def test_select_path_ignores_routes_not_ending_at_destination():
    routes = [[A, Point(9, 9)], [A, B]]
    assert select_path(routes, D) == []
    assert select_path([], D) == []


def test_select_path_tie_returns_a_minimal_route():
    r1 = [A, Point(10, 0), D]
    r2 = [A, Point(0, 10), D]
    best = select_path([r1, r2], D)
    assert best in (r1, r2)
    assert abs(route_length(best) - 20.0) < 1e-12
