from __future__ import annotations

import math
from typing import Sequence, Tuple, TYPE_CHECKING

from ..types.metrics import TickMetrics

if TYPE_CHECKING:
    from ..core.boid import Boid


def population_stats(boids: Sequence[Boid]) -> Tuple[int, float, float, float, float, float]:
    """(population, average speed, max speed, centroid x, centroid y, spread)."""
    population = len(boids)
    if population == 0:
        return 0, 0.0, 0.0, 0.0, 0.0, 0.0
    speed_sum = 0.0
    max_speed = 0.0
    sum_x = 0.0
    sum_y = 0.0
    for boid in boids:
        speed = boid.velocity.length()
        speed_sum += speed
        if speed > max_speed:
            max_speed = speed
        sum_x += boid.coords.x
        sum_y += boid.coords.y
    centroid_x = sum_x / population
    centroid_y = sum_y / population
    spread = sum(math.hypot(b.coords.x - centroid_x, b.coords.y - centroid_y) for b in boids) / population
    return population, speed_sum / population, max_speed, centroid_x, centroid_y, spread


def create_metrics(
    tick: int,
    respawns: int,
    neighbor_checks: int,
    duration_ms: float,
    stats: Tuple[int, float, float, float, float, float],
) -> TickMetrics:
    population, average_speed, max_speed, centroid_x, centroid_y, spread = stats
    return TickMetrics(
        tick=tick,
        population=population,
        respawns=respawns,
        average_speed=average_speed,
        max_speed=max_speed,
        centroid_x=centroid_x,
        centroid_y=centroid_y,
        spread=spread,
        neighbor_checks=neighbor_checks,
        tick_duration_ms=duration_ms,
    )
