from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..systems import motion, steering
from .config import KinematicsConfig
from .geometry import Point, Vector


@dataclass(frozen=True, slots=True)
class Boid:
    """One flocking agent for one tick.

    Boids are never mutated: a step produces the next boid and the coefficients
    and world edges carry over unchanged.
    """

    coords: Point
    velocity: Vector
    cohesion: float
    separation: float
    alignment: float
    attraction: float
    edges: Point

    def step(
        self,
        others: Sequence["Boid"],
        target: Point,
        kinematics: Optional[KinematicsConfig] = None,
    ) -> "Boid":
        """Next boid with the world edges treated as solid walls.

        `others` must not contain this boid. Raises BoundaryViolationError if
        the bounce cannot bring the boid back inside the world.
        """
        return motion.step(self, others, target, kinematics)

    def wrapped_step(
        self,
        others: Sequence["Boid"],
        target: Point,
        max_x: Optional[float] = None,
        max_y: Optional[float] = None,
        kinematics: Optional[KinematicsConfig] = None,
    ) -> "Boid":
        """Next boid on a torus of size max_x by max_y (defaults to the edges)."""
        return motion.wrapped_step(self, others, target, max_x, max_y, kinematics)

    def composite_acceleration(
        self,
        others: Sequence["Boid"],
        target: Point,
        kinematics: Optional[KinematicsConfig] = None,
    ) -> Vector:
        return steering.composite_acceleration(self, others, target, kinematics)
