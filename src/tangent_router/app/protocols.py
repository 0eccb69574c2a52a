from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from tangent_router.domain.entities.geography import Point, Polygon


# ------------- Search --------------------
@runtime_checkable
class WaypointGenerator(Protocol):
    """
    Responsibilities:
      • Propose detour points next to obstacle corners.
      • Never propose the current search origin.
    Candidates need not be visible from the origin; the search filters them.
    """

    def candidates(self, obstacles: Sequence[Polygon], origin: Point) -> list[Point]: ...


@runtime_checkable
class RouteSink(Protocol):
    def write(self, ev) -> None: ...
