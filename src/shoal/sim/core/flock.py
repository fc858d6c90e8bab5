from __future__ import annotations

import logging
import math
from time import perf_counter
from typing import List, Optional

from .boid import Boid
from .config import SimulationConfig
from .errors import BoundaryViolationError
from .geometry import Point, Vector
from .rng import DeterministicRng
from ..systems import metrics as metrics_system
from ..systems.neighbors import AllOthers
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata, SnapshotWorld
from ..utils.math2d import _heading_from_velocity

logger = logging.getLogger(__name__)


class Flock:
    """A population of boids advanced one tick at a time.

    Each tick reads the previous population and builds a fresh list, so no boid
    ever sees another boid's next state.
    """

    def __init__(self, config: SimulationConfig, neighbors: Optional[AllOthers] = None):
        self._config = config
        self._rng = DeterministicRng(config.seed)
        self._neighbors = AllOthers() if neighbors is None else neighbors
        self._edges = Point(float(config.world_width), float(config.world_height))
        self._boids: List[Boid] = []
        self._target = self.center
        self._metrics: TickMetrics | None = None
        self._bootstrap_population()

    @property
    def boids(self) -> List[Boid]:
        return self._boids

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    @property
    def edges(self) -> Point:
        return Point(self._edges.x, self._edges.y)

    @property
    def center(self) -> Point:
        return Point(self._edges.x * 0.5, self._edges.y * 0.5)

    @property
    def target(self) -> Point:
        return Point(self._target.x, self._target.y)

    def set_target(self, target: Point) -> None:
        self._target = Point(float(target.x), float(target.y))

    def reset(self) -> None:
        self._boids = []
        self._rng.reset()
        self._target = self.center
        self._metrics = None
        self._bootstrap_population()

    def step(self, tick: int) -> TickMetrics:
        start = perf_counter()
        config = self._config
        kinematics = config.kinematics
        target = self._target
        population = self._boids
        next_population: List[Boid] = []
        neighbor_checks = 0
        respawns = 0

        for index, boid in enumerate(population):
            others = self._neighbors.neighbors(population, index)
            neighbor_checks += len(others)
            if config.wrapped:
                next_population.append(
                    boid.wrapped_step(others, target, self._edges.x, self._edges.y, kinematics=kinematics)
                )
                continue
            try:
                next_population.append(boid.step(others, target, kinematics=kinematics))
            except BoundaryViolationError as exc:
                logger.debug("tick %d: respawning boid %d (%s)", tick, index, exc)
                next_population.append(self.respawn_boid())
                respawns += 1

        self._boids = next_population
        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(
            tick,
            respawns,
            neighbor_checks,
            duration_ms,
            metrics_system.population_stats(self._boids),
        )
        return self._metrics

    def spawn_boid(self) -> Boid:
        """New boid near the center, heading outward at the configured speed."""
        flock = self._config.flock
        center = self.center
        coords = self._rng.next_point_near(center, flock.spawn_radius, self._edges)
        velocity = Vector(
            math.copysign(flock.initial_speed, coords.x - center.x),
            math.copysign(flock.initial_speed, coords.y - center.y),
        )
        return self._make_boid(coords, velocity)

    def respawn_boid(self) -> Boid:
        """Replacement for a boid lost at the walls: near the center, at rest."""
        coords = self._rng.next_point_near(self.center, self._config.flock.spawn_radius, self._edges)
        return self._make_boid(coords, Vector(0.0, 0.0))

    def snapshot(self, tick: int) -> Snapshot:
        metrics = self._metrics or metrics_system.create_metrics(
            tick, 0, 0, 0.0, metrics_system.population_stats(self._boids)
        )
        config = self._config
        boids = []
        for index, boid in enumerate(self._boids):
            velocity = boid.velocity
            boids.append(
                {
                    "id": index,
                    "x": boid.coords.x,
                    "y": boid.coords.y,
                    "vx": velocity.x,
                    "vy": velocity.y,
                    "speed": velocity.length(),
                    "heading": _heading_from_velocity(velocity),
                }
            )
        return Snapshot(
            tick=tick,
            metrics=metrics,
            boids=boids,
            world=SnapshotWorld(width=self._edges.x, height=self._edges.y, wrapped=config.wrapped),
            metadata=SnapshotMetadata(
                tick_rate=config.tick_rate,
                seed=config.seed,
                config_version=config.config_version,
            ),
            target={"x": self._target.x, "y": self._target.y},
        )

    def _make_boid(self, coords: Point, velocity: Vector) -> Boid:
        flock = self._config.flock
        return Boid(
            coords=coords,
            velocity=velocity,
            cohesion=flock.cohesion,
            separation=flock.separation,
            alignment=flock.alignment,
            attraction=flock.attraction,
            edges=Point(self._edges.x, self._edges.y),
        )

    def _bootstrap_population(self) -> None:
        for _ in range(self._config.flock.population):
            self._boids.append(self.spawn_boid())
        logger.info(
            "bootstrapped %d boids in a %.0fx%.0f %s world",
            len(self._boids),
            self._edges.x,
            self._edges.y,
            "wrapped" if self._config.wrapped else "walled",
        )
