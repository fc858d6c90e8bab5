from __future__ import annotations

import math

from ..core.geometry import Vector


def _scaled_direction(offset: Vector, magnitude: float) -> Vector:
    """Vector along `offset` with the given (possibly negative) magnitude.

    A zero-length offset has no direction and maps to the zero vector.
    """
    length = offset.length()
    if length == 0.0:
        return Vector(0.0, 0.0)
    scale = magnitude / length
    return Vector(offset.x * scale, offset.y * scale)


def _heading_from_velocity(vector: Vector) -> float:
    if vector.length_squared() < 1e-12:
        return 0.0
    return math.atan2(vector.y, vector.x)
