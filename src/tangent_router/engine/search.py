# engine/search.py
import time
from collections.abc import Sequence
from dataclasses import dataclass

from tangent_router.app.protocols import WaypointGenerator
from tangent_router.domain.entities.geography import Point, Polygon, Segment
from tangent_router.domain.entities.route import Route
from tangent_router.domain.geometry import segment_polygon_intersections
from tangent_router.domain.waypoints import GridNeighborWaypoints

from .hooks import NoopHooks, SearchHooks


@dataclass(frozen=True)
class SearchLimits:
    max_depth: int = 32
    max_nodes: int = 20_000


class SearchExhausted(RuntimeError):
    def __init__(self, nodes: int, max_nodes: int):
        super().__init__(f"route search exhausted: {nodes} nodes > budget {max_nodes}")
        self.nodes, self.max_nodes = nodes, max_nodes


def unobstructed(origin: Point, target: Point, obstacles: Sequence[Polygon]) -> bool:
    """Straight line origin->target crosses no obstacle, touching one at origin is allowed."""
    seg = Segment(origin, target)
    for ob in obstacles:
        hits = segment_polygon_intersections(seg, ob)
        if hits and hits != [origin]:
            return False
    return True


def visible(origin: Point, target: Point, obstacles: Sequence[Polygon]) -> bool:
    """Strict line of sight: no contact with any obstacle at all."""
    seg = Segment(origin, target)
    return not any(segment_polygon_intersections(seg, ob) for ob in obstacles)


class RouteSearch:
    """
    Recursive visibility search. Each call returns a fresh Route tree rooted at
    the origin; branches grow through waypoints until the destination is in
    direct line of sight. Branches stop at the current depth limit, which
    `run` raises one level at a time up to `limits.max_depth`.
    """

    def __init__(
        self,
        waypoints: WaypointGenerator | None = None,
        limits: SearchLimits | None = None,
        hooks: SearchHooks | None = None,
    ):
        self.waypoints = waypoints or GridNeighborWaypoints()
        self.limits = limits or SearchLimits()
        self._hooks = hooks or NoopHooks()
        self.nodes = 0
        self.truncated = 0
        self.depth_limit = 0
        self._reached = False

    def run(self, obstacles: Sequence[Polygon], origin: Point, destination: Point) -> Route:
        """
        Iterative deepening: the tree is rebuilt with a growing depth limit until
        one attempt reaches the destination or explores everything without
        truncation. The node budget spans all attempts.
        """
        t0 = time.perf_counter()
        obstacles = tuple(obstacles)
        self.nodes, self.truncated = 0, 0
        self._hooks.search_start(origin=origin, destination=destination, obstacles=len(obstacles))
        max_depth = self.limits.max_depth
        try:
            for depth_limit in range(1, max_depth + 1) if max_depth else (0,):
                self.depth_limit, self.truncated, self._reached = depth_limit, 0, False
                self._hooks.deepen(depth_limit=depth_limit, nodes=self.nodes)
                tree = self._expand(obstacles, origin, destination, frozenset(), 0)
                if self._reached or not self.truncated:
                    break
            return tree
        finally:
            self._hooks.search_end(
                nodes=self.nodes,
                truncated=self.truncated,
                wall_ms=(time.perf_counter() - t0) * 1000,
            )

    def _expand(
        self,
        obstacles: tuple[Polygon, ...],
        origin: Point,
        destination: Point,
        used: frozenset[Point],
        depth: int,
    ) -> Route:
        self.nodes += 1
        if self.nodes > self.limits.max_nodes:
            self._hooks.error(reason="budget_exhausted", nodes=self.nodes, depth=depth)
            raise SearchExhausted(self.nodes, self.limits.max_nodes)

        node = Route(point=origin)
        if unobstructed(origin, destination, obstacles):
            node.children.append(Route(point=destination))
            self._reached = True
            return node

        if depth >= self.depth_limit:
            self.truncated += 1
            self._hooks.truncated(point=origin, depth=depth)
            return node

        candidates = self.waypoints.candidates(obstacles, origin)
        apexes = [c for c in candidates if visible(origin, c, obstacles)]
        fresh = [a for a in apexes if a not in used]

        if not fresh:
            self._hooks.dead_branch(point=origin, depth=depth)
            return node

        self._hooks.expand(
            point=origin, depth=depth, candidates=len(candidates), children=len(fresh)
        )
        # children skip every apex visible from this step, not only their siblings
        inherited = used | frozenset(apexes)
        for a in fresh:
            node.children.append(self._expand(obstacles, a, destination, inherited, depth + 1))
        return node


def search(
    obstacles: Sequence[Polygon],
    origin: Point,
    destination: Point,
    *,
    limits: SearchLimits | None = None,
    waypoints: WaypointGenerator | None = None,
    hooks: SearchHooks | None = None,
) -> Route:
    return RouteSearch(waypoints=waypoints, limits=limits, hooks=hooks).run(
        obstacles, origin, destination
    )
