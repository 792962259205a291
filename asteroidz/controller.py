"""Steering for any game object: heading-relative acceleration and turning."""

from __future__ import annotations

import math

from asteroidz.gameobject import GameObject
from asteroidz.geometry import Vector3, deg2rad


class MovementController:
    """Drives a game object's acceleration along its heading and its rotation."""

    def __init__(self, obj: GameObject) -> None:
        self.object = obj
        self.acceleration = 0.0

    def accelerate(self, a: float) -> None:
        """Accelerate the object by ``a`` along its current heading."""
        heading = deg2rad(self.object.angle)
        direction = Vector3(math.cos(heading), math.sin(heading), 0.0)
        self.object.acceleration = direction * a
        self.acceleration = a

    def rotate(self, r: float) -> None:
        """Set the object's rotation and re-aim the current acceleration."""
        self.object.rotation = r
        self.accelerate(self.acceleration)