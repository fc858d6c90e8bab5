from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from .metrics import TickMetrics


@dataclass(slots=True)
class Snapshot:
    tick: int
    metrics: TickMetrics
    boids: List[Dict[str, Any]]
    world: "SnapshotWorld"
    metadata: "SnapshotMetadata"
    target: Dict[str, float]


@dataclass(slots=True)
class SnapshotWorld:
    width: float
    height: float
    wrapped: bool


@dataclass(slots=True)
class SnapshotMetadata:
    tick_rate: float
    seed: int
    config_version: str
