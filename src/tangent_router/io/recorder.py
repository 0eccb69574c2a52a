# io/recorder.py
import json
import sys

from tangent_router.app.events import PlanCompleted
from tangent_router.app.protocols import RouteSink


def _xy(p) -> list[float]:
    return [p.x, p.y]


def plan_row(ev: PlanCompleted) -> dict:
    """Flat JSON-ready row: points as [x, y] pairs, path as a polyline."""
    return {
        "event": type(ev).__name__,
        "run_id": ev.run_id,
        "status": ev.status,
        "origin": _xy(ev.origin),
        "destination": _xy(ev.destination),
        "length": round(ev.length, 6),
        "hops": max(0, len(ev.path) - 1),
        "path": [_xy(p) for p in ev.path],
    }


class JsonlSink:
    """One plan per line; search statistics stay in the logs."""

    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, ev: PlanCompleted) -> None:
        self.fp.write(json.dumps(plan_row(ev)) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list[PlanCompleted] = []

    def write(self, ev: PlanCompleted) -> None:
        self.events.append(ev)

    def found(self) -> list[PlanCompleted]:
        return [ev for ev in self.events if ev.status == "found"]


class Recorder:
    def __init__(self, *sinks: RouteSink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev: PlanCompleted):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                pass  # a broken sink must not fail the plan
