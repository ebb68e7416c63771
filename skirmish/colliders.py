"""Circle, box and line shapes that can be drawn and tested for overlap.

Shapes draw onto any canvas offering ``ellipse``, ``rectangle`` and ``line``
methods that take integer coordinates followed by a :class:`Color`.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from skirmish.geometry import Color, Vector


class Collider(ABC):
    """A drawable shape with a centre and a pen colour."""

    def __init__(self, center=None):
        self.center = center.copy() if center is not None else Vector()
        self.color = Color.GREEN

    def set_red(self):
        self.color = Color.RED

    def set_green(self):
        self.color = Color.GREEN

    def set_sky(self):
        self.color = Color.SKY

    def update(self):
        """Advance the shape by one frame; plain shapes do nothing."""

    @abstractmethod
    def render(self, canvas):
        """Draw the shape onto ``canvas``."""

    def is_collision(self, other):
        """Whether this shape overlaps a point, a circle or a box."""
        if isinstance(other, Vector):
            return self._contains(other)
        if isinstance(other, CircleCollider):
            return self._hits_circle(other)
        if isinstance(other, BoxCollider):
            return self._hits_box(other)
        if isinstance(other, Collider):
            return False
        raise TypeError(f"cannot test collision with {type(other).__name__}")

    @abstractmethod
    def _contains(self, point):
        ...

    @abstractmethod
    def _hits_circle(self, circle):
        ...

    @abstractmethod
    def _hits_box(self, box):
        ...


@dataclass(frozen=True)
class OBBInfo:
    """An oriented box: its centre, half-edge vectors and half-edge lengths."""

    position: Vector
    directions: tuple[Vector, Vector]
    lengths: tuple[float, float]


def _circle_meets_box(circle, box):
    info = box.obb()
    to_circle = circle.center - info.position
    reach = math.hypot(*info.lengths) + circle.radius
    if reach < to_circle.length():
        return False
    for direction, half_length in zip(info.directions, info.lengths):
        projected = abs(direction.normalized().dot(to_circle))
        if projected > circle.radius + half_length:
            return False
    return True


class CircleCollider(Collider):
    """A circle given by centre and radius."""

    def __init__(self, center, radius):
        super().__init__(center)
        self.radius = radius

    def render(self, canvas):
        canvas.ellipse(
            int(self.center.x - self.radius),
            int(self.center.y - self.radius),
            int(self.center.x + self.radius),
            int(self.center.y + self.radius),
            self.color,
        )

    def _contains(self, point):
        return (point - self.center).length() < self.radius

    def _hits_circle(self, circle):
        return (circle.center - self.center).length() < self.radius + circle.radius

    def _hits_box(self, box):
        return _circle_meets_box(self, box)


class BoxCollider(Collider):
    """An axis-aligned box given by centre and full size."""

    def __init__(self, center, size):
        super().__init__(center)
        self.half_size = size * 0.5

    @property
    def left(self):
        return int(self.center.x - self.half_size.x)

    @property
    def right(self):
        return int(self.center.x + self.half_size.x)

    @property
    def top(self):
        return int(self.center.y - self.half_size.y)

    @property
    def bottom(self):
        return int(self.center.y + self.half_size.y)

    def render(self, canvas):
        canvas.rectangle(self.left, self.top, self.right, self.bottom, self.color)

    def obb(self):
        """The box as an oriented bounding box."""
        return OBBInfo(
            position=self.center.copy(),
            directions=(Vector(self.half_size.x, 0), Vector(0, -self.half_size.y)),
            lengths=(self.half_size.x, self.half_size.y),
        )

    def separating_axis(self, axis, e1, e2):
        """The extent of half-edges ``e1`` and ``e2`` projected onto ``axis``."""
        return abs(axis.dot(e1)) + abs(axis.dot(e2))

    def _contains(self, point):
        return self.left < point.x < self.right and self.top < point.y < self.bottom

    def _hits_circle(self, circle):
        return _circle_meets_box(circle, self)

    def _hits_box(self, box):
        a = self.obb()
        b = box.obb()
        offset = b.position - a.position
        ea1, ea2 = a.directions
        eb1, eb2 = b.directions
        na1, na2 = ea1.normalized(), ea2.normalized()
        nb1, nb2 = eb1.normalized(), eb2.normalized()

        checks = (
            (na1, self.separating_axis(na1, eb1, eb2), a.lengths[0]),
            (na2, self.separating_axis(na2, eb1, eb2), a.lengths[1]),
            (nb1, self.separating_axis(nb1, ea1, ea2), b.lengths[0]),
            (nb2, self.separating_axis(nb2, ea1, ea2), a.lengths[1]),
        )
        return all(abs(axis.dot(offset)) <= r1 + r2 for axis, r1, r2 in checks)


class Line:
    """A line segment that can report where it crosses another."""

    def __init__(self, start, end):
        self.start = start.copy()
        self.end = end.copy()
        self.intersection = Vector()
        self.color = Color.GREEN

    def set_red(self):
        self.color = Color.RED

    def set_green(self):
        self.color = Color.GREEN

    def update(self):
        """Advance the line by one frame; lines do nothing."""

    def render(self, canvas):
        canvas.line(
            int(self.start.x), int(self.start.y), int(self.end.x), int(self.end.y), self.color
        )

    def is_collision(self, other):
        """Whether the two segments cross; records the crossing point of the lines."""
        dir1 = self.end - self.start
        dir2 = other.end - other.start
        denom = dir1.cross(dir2)
        if int(denom) == 0:
            return False
        diff = other.start - self.start
        t = diff.cross(dir2) / denom
        u = diff.cross(dir1) / denom
        self.intersection = self.start + dir1 * t
        return 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0