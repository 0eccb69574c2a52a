# app/events.py
from dataclasses import dataclass, field
from typing import Literal

from tangent_router.domain.entities.geography import Point

PlanStatus = Literal["found", "unreachable", "exhausted"]


@dataclass
class PlanCompleted:
    run_id: str
    origin: Point
    destination: Point
    status: PlanStatus
    length: float
    nodes: int  # expanded search nodes
    routes: int  # extracted root-to-leaf sequences
    path: list[Point] = field(default_factory=list)
