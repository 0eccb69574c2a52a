# engine/hooks.py
from typing import Protocol

from tangent_router.domain.entities.geography import Point


class SearchHooks(Protocol):
    def search_start(self, *, origin: Point, destination: Point, obstacles: int): ...
    def search_end(self, *, nodes: int, truncated: int, wall_ms: float): ...
    def deepen(self, *, depth_limit: int, nodes: int): ...
    def expand(self, *, point: Point, depth: int, candidates: int, children: int): ...
    def dead_branch(self, *, point: Point, depth: int): ...
    def truncated(self, *, point: Point, depth: int): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def search_end(self, **_):
        pass

    def deepen(self, **_):
        pass

    def expand(self, **_):
        pass

    def dead_branch(self, **_):
        pass

    def truncated(self, **_):
        pass

    def error(self, **_):
        pass
