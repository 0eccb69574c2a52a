# runtime/registries.py
from collections.abc import Callable

from tangent_router.app.protocols import WaypointGenerator
from tangent_router.config.models import WaypointsGridModel, WaypointsUnion
from tangent_router.domain.waypoints import GridNeighborWaypoints

WaypointsFactory = Callable[[WaypointsUnion], WaypointGenerator]

_waypoints_registry: dict[str, WaypointsFactory] = {}


# ------------------- Waypoint generator registry ---------------------------


def register_waypoints(kind: str):
    def deco(fn: WaypointsFactory):
        _waypoints_registry[kind] = fn
        return fn

    return deco


def make_waypoints(cfg: WaypointsUnion) -> WaypointGenerator:
    try:
        factory = _waypoints_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown waypoints kind {cfg.kind!r}")
    return factory(cfg)


@register_waypoints("grid_neighbors")
def _make_grid(cfg: WaypointsGridModel):
    return GridNeighborWaypoints(step=cfg.step, clip_negative=cfg.clip_negative)
