from __future__ import annotations

import random

from .geometry import Point


class DeterministicRng:
    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_range(self, low: float, high: float) -> float:
        return self._random.uniform(low, high)

    def next_point_near(self, center: Point, radius: float, edges: Point) -> Point:
        """Uniform point in the square of half-width `radius` around `center`, clipped to the world."""
        x = self.next_range(max(0.0, center.x - radius), min(edges.x, center.x + radius))
        y = self.next_range(max(0.0, center.y - radius), min(edges.y, center.y + radius))
        return Point(x, y)
