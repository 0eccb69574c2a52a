from collections.abc import Sequence

from tangent_router.app.protocols import WaypointGenerator
from tangent_router.domain.entities.geography import Point, Polygon
from tangent_router.domain.geometry import convex_vertices

# 8-neighbourhood, zero offset excluded
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class GridNeighborWaypoints(WaypointGenerator):
    """Grid-snapped points around each convex corner of every obstacle."""

    def __init__(self, step: float = 1.0, clip_negative: bool = True):
        if step <= 0:
            raise ValueError(f"step must be > 0, got {step}")
        self.step, self.clip_negative = step, clip_negative

    def around(self, vertex: Point) -> list[Point]:
        s = self.step
        return [Point(vertex.x + dx * s, vertex.y + dy * s) for dx, dy in NEIGHBOR_OFFSETS]

    def candidates(self, obstacles: Sequence[Polygon], origin: Point) -> list[Point]:
        # duplicates across obstacles are kept on purpose
        out: list[Point] = []
        for ob in obstacles:
            for v in convex_vertices(ob):
                for p in self.around(v):
                    if self.clip_negative and (p.x < 0 or p.y < 0):
                        continue
                    if p == origin:
                        continue
                    out.append(p)
        return out
