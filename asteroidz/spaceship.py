"""The player's spaceship."""

from __future__ import annotations

import math
from typing import Any, Iterable

from asteroidz.bounding import BoundingSphere
from asteroidz.entities import Shield
from asteroidz.gameobject import GameObject
from asteroidz.geometry import Vector3, deg2rad
from asteroidz.object_type import GameObjectType

DEFAULT_BULLET_SPEED = 30
SHIELD_RADIUS = 15.0
SHIELD_SCALE = 0.1

_ALIEN_BULLET = GameObjectType("AlienBullet")
_HARMFUL = (
    _ALIEN_BULLET,
    GameObjectType("AlienSpaceship"),
    GameObjectType("Asteroid"),
    GameObjectType("MiniAsteroid"),
)


class Spaceship(GameObject):
    """A ship that thrusts, turns, carries a shield and takes damage."""

    def __init__(
        self,
        position: Vector3 | None = None,
        velocity: Vector3 | None = None,
        acceleration: Vector3 | None = None,
        angle: float = 0.0,
        rotation: float = 0.0,
        health: int = 0,
    ) -> None:
        super().__init__("Spaceship", position, velocity, acceleration, angle, rotation)
        self.thrust_amount = 0.0
        self.bullet_speed = DEFAULT_BULLET_SPEED
        self.bullet_sprite: Any = None
        self.shield_sprite: Any = None
        self.shield: Shield | None = None
        self.is_hit = False
        self.health = health

    def update(self, t: int) -> None:
        """Advance the ship; its shield follows and leaves the world once spent."""
        super().update(t)
        if self.shield is None:
            return
        self.shield.position = self.position
        if not self.shield.active and self.world is not None:
            self.world.remove_object(self.shield)

    def thrust(self, t: float) -> None:
        """Accelerate by ``t`` along the ship's heading."""
        self.thrust_amount = t
        heading = deg2rad(self.angle)
        self.acceleration = Vector3(
            t * math.cos(heading), t * math.sin(heading), self.acceleration.z
        )

    def rotate(self, r: float) -> None:
        """Turn at ``r`` degrees per second."""
        self.rotation = r

    def create_shield(self, lifespan: int) -> Shield:
        """Put a fresh shield lasting ``lifespan`` ms around the ship."""
        if self.world is None:
            raise RuntimeError("a spaceship must be in a world to raise a shield")
        shield = Shield(self.position, lifespan)
        shield.bounding_shape = BoundingSphere(shield, SHIELD_RADIUS)
        shield.sprite = self.shield_sprite
        shield.scale = SHIELD_SCALE
        self.shield = shield
        self.world.add_object(shield)
        return shield

    def set_shield_visibility(self, visible: bool) -> None:
        """Reactivate the shield in the world, or flag it for removal."""
        if self.shield is None:
            raise RuntimeError("the spaceship has no shield")
        if self.world is None:
            raise RuntimeError("the spaceship is not in a world")
        if visible:
            self.shield.active = True
            self.world.add_object(self.shield)
        else:
            self.world.flag_for_removal(self.shield)

    def increase_bullet_speed(self, speed: int) -> None:
        """Make future bullets faster by ``speed``."""
        self.bullet_speed += speed

    def collision_test(self, other: GameObject) -> bool:
        """Collides with alien ships and bullets and with asteroids of any size."""
        self.is_hit = False
        if other.type not in _HARMFUL:
            return False
        if self.bounding_shape is None or other.bounding_shape is None:
            return False
        return self.bounding_shape.collision_test(other.bounding_shape)

    def on_collision(self, objects: Iterable[GameObject]) -> None:
        """Alien bullets cost one health, anything else is fatal; the shield drops."""
        for obj in objects:
            if obj.type == _ALIEN_BULLET:
                self.health -= 1
            else:
                self.health = 0
        if self.shield is not None:
            self.set_shield_visibility(False)
        if self.health == 0 and self.world is not None:
            self.world.flag_for_removal(self)
        self.is_hit = True