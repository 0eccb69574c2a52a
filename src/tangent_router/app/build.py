# tangent_router/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass, field

from tangent_router.app.events import PlanCompleted, PlanStatus
from tangent_router.config.models import ScenarioModel
from tangent_router.domain.entities.geography import Coord, Point, to_point, to_polygon
from tangent_router.domain.selection import extract_routes, route_length, select_path
from tangent_router.engine.search import RouteSearch, SearchExhausted, SearchLimits
from tangent_router.io.planner_logging import PlannerLogging
from tangent_router.io.recorder import Recorder
from tangent_router.runtime.registries import make_waypoints


@dataclass
class PlanResult:
    status: PlanStatus
    path: list[Point] = field(default_factory=list)
    length: float = 0.0
    routes: int = 0
    nodes: int = 0
    truncated: int = 0

    @property
    def found(self) -> bool:
        return self.status == "found"


@dataclass
class Planner:
    run_id: str
    obstacles: tuple[tuple[Point, ...], ...]
    search: RouteSearch
    hooks: PlannerLogging | None = None

    def plan(self, origin: Coord, destination: Coord) -> PlanResult:
        a, b = to_point(origin), to_point(destination)
        try:
            tree = self.search.run(self.obstacles, a, b)
        except SearchExhausted:
            result = PlanResult("exhausted", nodes=self.search.nodes)
        else:
            routes = extract_routes(tree)
            path = select_path(routes, b)
            if path:
                status = "found"
            elif self.search.truncated:
                # depth cut-off: a route may exist beyond the explored tree
                status = "exhausted"
            else:
                status = "unreachable"
            result = PlanResult(
                status,
                path=path,
                length=route_length(path),
                routes=len(routes),
                nodes=self.search.nodes,
                truncated=self.search.truncated,
            )

        if self.hooks:
            self.hooks.plan(
                PlanCompleted(
                    run_id=self.run_id,
                    origin=a,
                    destination=b,
                    status=result.status,
                    length=result.length,
                    nodes=result.nodes,
                    routes=result.routes,
                    path=list(result.path),
                )
            )
        return result


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> Planner:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        PlannerLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else None
    )

    # 2) Search engine
    search = RouteSearch(
        waypoints=make_waypoints(model.waypoints),
        limits=SearchLimits(max_depth=model.search.max_depth, max_nodes=model.search.max_nodes),
        hooks=hooks,
    )

    # 3) Obstacles are fixed for the planner's lifetime
    obstacles = tuple(to_polygon(poly) for poly in model.obstacles)

    return Planner(run_id=model.run_id, obstacles=obstacles, search=search, hooks=hooks)
