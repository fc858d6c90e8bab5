from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence, TYPE_CHECKING

from ..core.config import DEFAULT_KINEMATICS, KinematicsConfig
from ..core.errors import BoundaryViolationError
from ..core.geometry import Point, Vector
from ..utils.math2d import _scaled_direction
from .steering import composite_acceleration

if TYPE_CHECKING:
    from ..core.boid import Boid


def stokes_drag(velocity: Vector, drag_coefficient: float = DEFAULT_KINEMATICS.drag_coefficient) -> Vector:
    """Viscous drag F = -C_d * v, assuming laminar flow.

    A boid at rest feels no drag at all.
    """
    if velocity.x == 0.0 and velocity.y == 0.0:
        return Vector(0.0, 0.0)
    return _scaled_direction(velocity, -drag_coefficient * velocity.length())


def integrate(
    boid: Boid,
    others: Sequence[Boid],
    target: Point,
    kinematics: KinematicsConfig | None = None,
) -> tuple[Point, Vector]:
    kinematics = DEFAULT_KINEMATICS if kinematics is None else kinematics
    acceleration = composite_acceleration(boid, others, target, kinematics)
    drag = stokes_drag(boid.velocity, kinematics.drag_coefficient)
    # Unit time step.
    velocity = boid.velocity + acceleration + drag
    coords = boid.coords + velocity
    return coords, velocity


def _reflect_axis(coord: float, speed: float, extent: float) -> tuple[float, float]:
    dist_to_edge = extent - coord
    if dist_to_edge > extent or dist_to_edge < 0.0:
        speed = -speed
        coord = coord + 2.0 * dist_to_edge if dist_to_edge < 0.0 else abs(coord)
    return coord, speed


def reflect(coords: Point, velocity: Vector, edges: Point) -> tuple[Point, Vector]:
    """Elastic single-bounce off the world walls, each axis on its own.

    Not iterated, so a boid that overshoots a wall by more than the world
    extent stays outside.
    """
    x, vx = _reflect_axis(coords.x, velocity.x, edges.x)
    y, vy = _reflect_axis(coords.y, velocity.y, edges.y)
    return Point(x, y), Vector(vx, vy)


def _wrap_axis(coord: float, extent: float) -> float:
    if coord > extent:
        return coord - extent
    if coord < 0.0:
        return coord + extent
    return coord


def wrap(coords: Point, max_x: float, max_y: float) -> Point:
    return Point(_wrap_axis(coords.x, max_x), _wrap_axis(coords.y, max_y))


def within(coords: Point, edges: Point) -> bool:
    return 0.0 <= coords.x <= edges.x and 0.0 <= coords.y <= edges.y


def step(
    boid: Boid,
    others: Sequence[Boid],
    target: Point,
    kinematics: KinematicsConfig | None = None,
) -> Boid:
    coords, velocity = integrate(boid, others, target, kinematics)
    coords, velocity = reflect(coords, velocity, boid.edges)
    if not within(coords, boid.edges):
        raise BoundaryViolationError(coords, boid.edges)
    return replace(boid, coords=coords, velocity=velocity)


def wrapped_step(
    boid: Boid,
    others: Sequence[Boid],
    target: Point,
    max_x: Optional[float] = None,
    max_y: Optional[float] = None,
    kinematics: KinematicsConfig | None = None,
) -> Boid:
    coords, velocity = integrate(boid, others, target, kinematics)
    max_x = boid.edges.x if max_x is None else max_x
    max_y = boid.edges.y if max_y is None else max_y
    return replace(boid, coords=wrap(coords, max_x, max_y), velocity=velocity)
