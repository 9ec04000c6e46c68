"""A small mutable two-dimensional vector used for positions and velocities."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector2D:
    """A mutable 2D vector; in-place operators change the vector itself."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> int:
        """Return the Euclidean length, truncated to an integer."""
        return int(math.sqrt(self.x * self.x + self.y * self.y))

    def normalize(self) -> None:
        """Scale the vector by the reciprocal of its (truncated) length."""
        length = self.length()
        if length > 0:
            inverse = 1 / length
            self.x *= inverse
            self.y *= inverse

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __isub__(self, other: Vector2D) -> Vector2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> Vector2D:
        self.x *= scalar
        self.y *= scalar
        return self

    def __truediv__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x / scalar, self.y / scalar)

    def __itruediv__(self, scalar: float) -> Vector2D:
        self.x /= scalar
        self.y /= scalar
        return self