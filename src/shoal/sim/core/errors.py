from __future__ import annotations

from .geometry import Point


class BoundaryViolationError(ValueError):
    """Raised when a reflected boid still lies outside the world.

    The single-bounce reflection cannot recover a boid that overshoots a wall
    by more than the world extent. Callers decide what to do with it.
    """

    def __init__(self, coords: Point, edges: Point):
        super().__init__(
            f"Attempting to put boid outside of the world: ({coords.x:.3f}, {coords.y:.3f}) "
            f"not within [0, {edges.x}] x [0, {edges.y}]"
        )
        self.coords = coords
        self.edges = edges
