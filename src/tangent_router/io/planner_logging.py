# io/planner_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from tangent_router.engine.hooks import NoopHooks
from tangent_router.io.recorder import Recorder


def _default_json_logger(name="tangent_router", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def _xy(p):
    return [p.x, p.y] if p is not None else None


class PlannerLogging(NoopHooks):
    """
    One place to shape and emit structured logs for the route search and the
    plans built on top of it.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._expanded = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------------------------------------------------

    # search lifecycle

    def search_start(self, *, origin, destination, obstacles: int):
        self._expanded = 0
        self._emit(
            "INFO", "search_start", origin=_xy(origin), destination=_xy(destination),
            obstacles=obstacles,
        )

    def search_end(self, *, nodes: int, truncated: int, wall_ms: float):
        self._emit("INFO", "search_end", nodes=nodes, truncated=truncated, wall_ms=wall_ms)

    def deepen(self, *, depth_limit: int, nodes: int):
        if self.debug:
            self._emit("DEBUG", "deepen", depth_limit=depth_limit, nodes=nodes)

    def expand(self, *, point, depth: int, candidates: int, children: int):
        self._expanded += 1
        if self.debug and (self._expanded % self.sample_every) == 0:
            self._emit(
                "DEBUG", "expand", point=_xy(point), depth=depth, candidates=candidates,
                children=children,
            )

    def dead_branch(self, *, point, depth: int):
        if self.debug:
            self._emit("DEBUG", "dead_branch", point=_xy(point), depth=depth)

    def truncated(self, *, point, depth: int):
        if self.debug:
            self._emit("DEBUG", "truncated", point=_xy(point), depth=depth)

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "search_error", reason=reason, **extra)

    # ------------- Plan Reporting --------------------------

    def plan(self, ev):
        data = asdict(ev) if is_dataclass(ev) else {}
        data.pop("path", None)
        data.pop("run_id", None)
        self._emit("INFO", type(ev).__name__, **data, hops=max(0, len(ev.path) - 1))
        if self.recorder:
            self.recorder.emit(ev)
