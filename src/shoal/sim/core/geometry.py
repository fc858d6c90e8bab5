from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(slots=True)
class Vector:
    x: float
    y: float

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def normalize_ip(self) -> None:
        mag = self.length()
        if mag == 0.0:
            return
        self.x /= mag
        self.y /= mag

    def normalize(self) -> "Vector":
        copy = Vector(self.x, self.y)
        copy.normalize_ip()
        return copy

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __mul__(self, other: Union["Vector", float]) -> Union["Vector", float]:
        # Vector * Vector is the dot product, Vector * scalar scales.
        if isinstance(other, Vector):
            return self.dot(other)
        return Vector(self.x * other, self.y * other)

    def __rmul__(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> "Vector":
        return Vector(self.x / scalar, self.y / scalar)


@dataclass(slots=True)
class Point:
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def __add__(self, offset: Vector) -> "Point":
        return Point(self.x + offset.x, self.y + offset.y)

    def __sub__(self, other: Union["Point", Vector]) -> Union[Vector, "Point"]:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)
