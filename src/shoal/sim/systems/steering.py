from __future__ import annotations

import math
from typing import Sequence, TYPE_CHECKING

from ..core.config import DEFAULT_KINEMATICS, KinematicsConfig
from ..core.geometry import Point, Vector
from ..utils.math2d import _scaled_direction

if TYPE_CHECKING:
    from ..core.boid import Boid


def perception_weight(distance: float, falloff: float = DEFAULT_KINEMATICS.perception_falloff) -> float:
    """How well a boid perceives a flockmate `distance` away: min(1, 1/d**falloff).

    Anything within unit distance, coincident boids included, is seen at full
    strength.
    """
    if distance <= 1.0:
        return 1.0
    return min(1.0, distance ** -falloff)


def composite_acceleration(
    boid: Boid,
    others: Sequence[Boid],
    target: Point,
    kinematics: KinematicsConfig | None = None,
) -> Vector:
    kinematics = DEFAULT_KINEMATICS if kinematics is None else kinematics
    total_x = 0.0
    total_y = 0.0
    if others:
        if boid.cohesion != 0.0:
            toward_flock = cohesion(boid, others, kinematics.perception_falloff)
            total_x += toward_flock.x * boid.cohesion
            total_y += toward_flock.y * boid.cohesion
        if boid.separation != 0.0:
            away = separation(boid, others, kinematics.personal_space_sq)
            total_x += away.x * boid.separation
            total_y += away.y * boid.separation
        if boid.alignment != 0.0:
            match = alignment(boid, others, kinematics.perception_falloff)
            total_x += match.x * boid.alignment
            total_y += match.y * boid.alignment
    if boid.attraction != 0.0:
        seek = toward(boid, target, kinematics.target_decay)
        total_x += seek.x * boid.attraction
        total_y += seek.y * boid.attraction
    return Vector(total_x, total_y)


def cohesion(
    boid: Boid,
    others: Sequence[Boid],
    falloff: float = DEFAULT_KINEMATICS.perception_falloff,
) -> Vector:
    """Head for the perception-weighted centroid of the flockmates.

    The magnitude is the full distance to that centroid.
    """
    if not others:
        return Vector(0.0, 0.0)
    position = boid.coords
    sum_x = 0.0
    sum_y = 0.0
    weight_sum = 0.0
    for other in others:
        other_position = other.coords
        weight = perception_weight(position.distance_to(other_position), falloff)
        sum_x += other_position.x * weight
        sum_y += other_position.y * weight
        weight_sum += weight
    if weight_sum <= 0.0:
        return Vector(0.0, 0.0)
    inv = 1.0 / weight_sum
    return Vector(sum_x * inv - position.x, sum_y * inv - position.y)


def separation(
    boid: Boid,
    others: Sequence[Boid],
    personal_space_sq: float = DEFAULT_KINEMATICS.personal_space_sq,
) -> Vector:
    """Push away from every flockmate with strength personal_space_sq / d**2.

    No perception fall-off: distant boids are avoided too, only weakly.
    """
    accum_x = 0.0
    accum_y = 0.0
    position = boid.coords
    for other in others:
        offset_x = position.x - other.coords.x
        offset_y = position.y - other.coords.y
        dist_sq = offset_x * offset_x + offset_y * offset_y
        if dist_sq == 0.0:
            continue
        scale = personal_space_sq / dist_sq / math.sqrt(dist_sq)
        accum_x += offset_x * scale
        accum_y += offset_y * scale
    return Vector(accum_x, accum_y)


def alignment(
    boid: Boid,
    others: Sequence[Boid],
    falloff: float = DEFAULT_KINEMATICS.perception_falloff,
) -> Vector:
    """Close the gap between own velocity and the weighted local mean velocity."""
    if not others:
        return Vector(0.0, 0.0)
    position = boid.coords
    sum_x = 0.0
    sum_y = 0.0
    weight_sum = 0.0
    for other in others:
        weight = perception_weight(position.distance_to(other.coords), falloff)
        sum_x += other.velocity.x * weight
        sum_y += other.velocity.y * weight
        weight_sum += weight
    if weight_sum <= 0.0:
        return Vector(0.0, 0.0)
    inv = 1.0 / weight_sum
    velocity = boid.velocity
    return Vector(sum_x * inv - velocity.x, sum_y * inv - velocity.y)


def toward(boid: Boid, target: Point, decay: float = DEFAULT_KINEMATICS.target_decay) -> Vector:
    """Seek `target` with strength 1 / (1 + decay * d).

    The strength never reaches zero, so far targets still pull.
    """
    offset = target - boid.coords
    magnitude = 1.0 / (1.0 + decay * offset.length())
    return _scaled_direction(offset, magnitude)
