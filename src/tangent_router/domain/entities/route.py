from dataclasses import dataclass, field

from tangent_router.domain.entities.geography import Point


@dataclass
class Route:
    """Node of the route tree: root = search origin, successful leaves = destination."""

    point: Point | None = None
    children: list["Route"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def size(self) -> int:
        return 1 + sum(c.size() for c in self.children)
