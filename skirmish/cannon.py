"""A movable cannon that aims at the mouse and fires balls that fall under gravity."""

from __future__ import annotations

import random
import weakref
from dataclasses import dataclass, field

from skirmish.colliders import CircleCollider, Line
from skirmish.geometry import WIN_HEIGHT, WIN_WIDTH, Vector

MOVE_STEP = 3
POOL_SIZE = 80


@dataclass
class Controls:
    """The input state for one frame: mouse position and held keys."""

    mouse: Vector = field(default_factory=Vector)
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False


class Ball:
    """A cannon ball that flies along a direction and drops under gravity."""

    speed = 10.0
    gravity_step = 0.1

    def __init__(self, rng=None):
        rng = rng if rng is not None else random.Random()
        self.body = CircleCollider(Vector(-1000, 0), rng.randrange(50) + 10)
        self.body.set_sky()
        self.direction = Vector()
        self.gravity = 0.0
        self.active = False

    @property
    def center(self):
        return self.body.center

    @property
    def radius(self):
        return self.body.radius

    def update(self):
        """Move one frame; a ball that has left the screen becomes inactive."""
        if self.is_out():
            self.active = False
        if not self.active:
            return
        self.body.update()
        self.body.center = self.body.center + self.direction * self.speed
        self.gravity += self.gravity_step
        self.body.center.y += self.gravity

    def render(self, canvas):
        if self.active:
            self.body.render(canvas)

    def fire(self, center, direction):
        """Launch the ball from ``center`` along ``direction``."""
        self.active = True
        self.gravity = 0.0
        self.body.center = center.copy()
        self.direction = direction.copy()

    def is_out(self):
        """Whether the ball is past the left, right or bottom edge of the window."""
        x = int(self.body.center.x)
        y = int(self.body.center.y)
        return x > WIN_WIDTH or x < 0 or y > WIN_HEIGHT


class Barrel:
    """The cannon's barrel: a line from the cannon's centre along its aim."""

    length = 150.0

    def __init__(self):
        self.line = Line(Vector(), Vector())
        self.direction = Vector()
        self._cannon = None

    def attach(self, cannon):
        """Follow ``cannon`` without keeping it alive."""
        self._cannon = weakref.ref(cannon)

    @property
    def end(self):
        return self.line.end

    def update(self):
        cannon = self._cannon() if self._cannon is not None else None
        if cannon is None:
            return
        self.line.start = cannon.center.copy()
        self.line.end = self.line.start + self.direction * self.length
        self.line.update()

    def render(self, canvas):
        self.line.render(canvas)


class Cannon:
    """A round cannon body with a barrel and a pool of reusable balls."""

    delay_time = 0.1
    fire_step = 0.02

    def __init__(self, rng=None):
        rng = rng if rng is not None else random.Random()
        self.body = CircleCollider(Vector(350, 350), 50)
        self.barrel = Barrel()
        self.barrel.attach(self)
        self.balls = [Ball(rng) for _ in range(POOL_SIZE)]
        self.fire_time = 0.0

    @property
    def center(self):
        return self.body.center

    def update(self, controls):
        self.body.update()
        self.barrel.update()
        for ball in self.balls:
            ball.update()
        self._move(controls)
        self._aim(controls)
        if self.is_fire_ready():
            self.fire(controls)

    def render(self, canvas):
        self.barrel.render(canvas)
        self.body.render(canvas)
        for ball in self.balls:
            ball.render(canvas)

    def fire(self, controls):
        """Launch the first idle ball if fire is held; return it, or None."""
        if not controls.fire:
            return None
        ball = next((ball for ball in self.balls if not ball.active), None)
        if ball is None:
            return None
        ball.fire(self.barrel.end, self.barrel.direction)
        return ball

    def is_fire_ready(self):
        """Advance the fire timer; True once per elapsed delay."""
        self.fire_time += self.fire_step
        if self.fire_time > self.delay_time:
            self.fire_time = 0.0
            return True
        return False

    def _move(self, controls):
        center = self.body.center
        if controls.left:
            center.x -= MOVE_STEP
        if controls.right:
            center.x += MOVE_STEP
        if controls.up:
            center.y -= MOVE_STEP
        if controls.down:
            center.y += MOVE_STEP

    def _aim(self, controls):
        offset = controls.mouse - self.body.center
        if offset.length() == 0:
            return
        self.barrel.direction = offset.normalized()