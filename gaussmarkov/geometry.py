"""Three-dimensional vectors and axis-aligned boxes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A point or displacement in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def scaled(self, factor: float) -> Vector:
        """Return this vector multiplied by ``factor``."""
        return Vector(self.x * factor, self.y * factor, self.z * factor)


@dataclass(frozen=True)
class Box:
    """An axis-aligned box; the default is the model's default cruising area."""

    x_min: float = -100.0
    x_max: float = 100.0
    y_min: float = -100.0
    y_max: float = 100.0
    z_min: float = 0.0
    z_max: float = 100.0

    def is_inside(self, point: Vector) -> bool:
        """Whether ``point`` lies inside the box, faces included."""
        return (
            self.x_min <= point.x <= self.x_max
            and self.y_min <= point.y <= self.y_max
            and self.z_min <= point.z <= self.z_max
        )