"""Demo scenes and the program that switches between them."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from skirmish.cannon import Cannon
from skirmish.colliders import BoxCollider, CircleCollider, Line
from skirmish.geometry import Color, Vector, lerp

SCENE_NAMES = ("PaintScene", "CollisionScene", "CannonScene", "LineScene")
DEFAULT_SCENE = "LineScene"


class Scene(ABC):
    """One screen of the demo, updated and drawn every frame."""

    @abstractmethod
    def update(self, controls):
        """Advance the scene by one frame using the current input."""

    @abstractmethod
    def render(self, canvas):
        """Draw the scene onto ``canvas``."""


class PaintScene(Scene):
    """A circle, a box that glides towards the mouse, and a line."""

    follow_rate = 0.1

    def __init__(self):
        self.pens = [Color.RED, Color.GREEN, Color.BLUE]
        self.current_color = 0
        self.circle = CircleCollider(Vector(100, 100), 70)
        self.box = BoxCollider(Vector(200, 200), Vector(140, 140))
        self.line = Line(Vector(500, 500), Vector(700, 700))
        self.circle.set_red()
        self.box.set_green()

    @property
    def pen(self):
        return self.pens[self.current_color]

    def update(self, controls):
        self.box.center = lerp(self.box.center, controls.mouse, self.follow_rate)
        self.circle.update()
        self.box.update()
        self.line.update()

    def render(self, canvas):
        self.circle.render(canvas)
        self.box.render(canvas)
        self.line.render(canvas)


class CollisionScene(Scene):
    """A fixed circle that turns red when the mouse-driven box touches it."""

    def __init__(self):
        self.circle = CircleCollider(Vector(400, 400), 70)
        self.moving = BoxCollider(Vector(0, 0), Vector(100, 100))

    def update(self, controls):
        self.circle.update()
        self.moving.update()
        self.moving.center = controls.mouse.copy()
        if self.circle.is_collision(self.moving):
            self.circle.set_red()
        else:
            self.circle.set_green()

    def render(self, canvas):
        self.circle.render(canvas)
        self.moving.render(canvas)


class CannonScene(Scene):
    """A cannon steered by the keyboard and aimed with the mouse."""

    def __init__(self, rng=None):
        self.cannon = Cannon(rng)

    def update(self, controls):
        self.cannon.update(controls)

    def render(self, canvas):
        self.cannon.render(canvas)


class LineScene(Scene):
    """A fixed line that turns red while the mouse-driven line crosses it."""

    def __init__(self):
        self.pointer = Line(Vector(100, 100), Vector(0, 0))
        self.target = Line(Vector(100, 400), Vector(800, 100))

    def update(self, controls):
        self.pointer.end = controls.mouse.copy()
        self.pointer.update()
        self.target.update()
        if self.target.is_collision(self.pointer):
            self.target.set_red()
        else:
            self.target.set_green()

    def render(self, canvas):
        self.pointer.render(canvas)
        self.target.render(canvas)


class Program:
    """Holds every scene and forwards frames to the current one."""

    def __init__(self, rng=None):
        rng = rng if rng is not None else random.Random()
        self.scenes = {
            "PaintScene": PaintScene(),
            "CollisionScene": CollisionScene(),
            "CannonScene": CannonScene(rng),
            "LineScene": LineScene(),
        }
        self.current = DEFAULT_SCENE

    @property
    def scene(self):
        return self.scenes[self.current]

    def update(self, controls):
        self.scene.update(controls)

    def render(self, canvas):
        self.scene.render(canvas)

    def set_scene(self, name):
        """Switch to the scene called ``name``; unknown names raise KeyError."""
        if name not in self.scenes:
            raise KeyError(f"unknown scene: {name}")
        self.current = name