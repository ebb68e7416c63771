"""Plane vectors, screen constants and drawing colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

PI = 3.141592

WIN_WIDTH = 1200
WIN_HEIGHT = 720


class Color(Enum):
    """Pen colours as RGB triples."""

    RED = (255, 0, 0)
    GREEN = (0, 255, 0)
    BLUE = (0, 0, 255)
    SKY = (209, 234, 240)
    WHITE = (255, 255, 255)

    @property
    def hex(self):
        """The colour as a ``#rrggbb`` string."""
        return "#{:02x}{:02x}{:02x}".format(*self.value)


@dataclass
class Vector:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, value):
        return Vector(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __getitem__(self, index):
        if index in (0, -2):
            return self.x
        if index in (1, -1):
            return self.y
        raise IndexError(f"vector index out of range: {index}")

    def copy(self):
        return Vector(self.x, self.y)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        """The z component of the cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def length(self):
        return math.hypot(self.x, self.y)

    def normalized(self):
        """A unit vector with the same direction; a zero vector raises ZeroDivisionError."""
        length = self.length()
        return Vector(self.x / length, self.y / length)

    def angle(self, other=None):
        """The vector's angle from the x axis, or its angle relative to ``other``."""
        own = math.atan2(self.y, self.x)
        if other is None:
            return own
        return own - other.angle()


def lerp(start, end, t):
    """Linear interpolation from ``start`` towards ``end`` by the fraction ``t``."""
    return start + (end - start) * t