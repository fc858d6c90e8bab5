from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    population: int
    respawns: int
    average_speed: float
    max_speed: float
    centroid_x: float
    centroid_y: float
    spread: float
    neighbor_checks: int
    tick_duration_ms: float = 0.0
