from collections.abc import Sequence

import numpy as np

from tangent_router.domain.entities.geography import Point
from tangent_router.domain.entities.route import Route


def extract_routes(tree: Route) -> list[list[Point]]:
    """Depth-first walk; one root-to-leaf point sequence per leaf."""
    out: list[list[Point]] = []
    if tree.point is None:
        return out
    stack: list[tuple[Route, list[Point]]] = [(tree, [tree.point])]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            out.append(prefix)
            continue
        # reversed so siblings come out in tree order
        for child in reversed(node.children):
            if child.point is None:
                continue
            stack.append((child, prefix + [child.point]))
    return out


def route_length(route: Sequence[Point]) -> float:
    if len(route) < 2:
        return 0.0
    xy = np.array([(p.x, p.y) for p in route], dtype=float)
    d = np.diff(xy, axis=0)
    return float(np.hypot(d[:, 0], d[:, 1]).sum())


def select_path(routes: Sequence[Sequence[Point]], destination: Point) -> list[Point]:
    """Shortest route ending at destination, or [] if none does."""
    reaching = [r for r in routes if r and r[-1] == destination]
    if not reaching:
        return []
    best = min(reaching, key=route_length)  # first of equal-length routes wins
    return list(best)
