"""The base game object: kinematics, wrapping and collision hooks."""

from __future__ import annotations

import copy as _copy
from typing import Any, Iterable

from asteroidz.geometry import Vector3
from asteroidz.object_type import GameObjectType


class GameObject:
    """An object that moves, turns and may collide within a game world."""

    def __init__(
        self,
        type_name: str,
        position: Vector3 | None = None,
        velocity: Vector3 | None = None,
        acceleration: Vector3 | None = None,
        angle: float = 0.0,
        rotation: float = 0.0,
    ) -> None:
        self.type = GameObjectType(type_name)
        self.world: Any = None
        self.position = position if position is not None else Vector3()
        self.velocity = velocity if velocity is not None else Vector3()
        self.acceleration = acceleration if acceleration is not None else Vector3()
        self.angle = float(angle)
        self.rotation = float(rotation)
        self.scale = 1.0
        self.shape: Any = None
        self.sprite: Any = None
        self.bounding_shape: Any = None

    def reset(self) -> None:
        """Put the object back at the centre, motionless and unrotated."""
        self.position = Vector3()
        self.velocity = Vector3()
        self.acceleration = Vector3()
        self.angle = 0.0
        self.rotation = 0.0

    def add_angle(self, a: float) -> None:
        """Turn by ``a`` degrees, folding the result back by one turn if needed."""
        self.angle += a
        if self.angle < 0:
            self.angle += 360
        if self.angle > 360:
            self.angle -= 360

    def update(self, t: int) -> None:
        """Advance the object by ``t`` milliseconds.

        Outside a world the object is reset instead of wrapped.
        """
        dt = t / 1000.0
        self.add_angle(self.rotation * dt)
        self.position = self.position + self.velocity * dt
        self.velocity = self.velocity + self.acceleration * dt
        if self.sprite is not None:
            self.sprite.update(t)
        if self.world is not None:
            x, y = self.world.wrap_xy(self.position.x, self.position.y)
            self.position = Vector3(x, y, self.position.z)
        else:
            self.reset()

    def collision_test(self, other: GameObject) -> bool:
        """Whether this object collides with ``other``; never, by default."""
        return False

    def on_collision(self, objects: Iterable[GameObject]) -> None:
        """React to colliding with ``objects``; nothing happens by default."""

    def copy(self) -> GameObject:
        """A copy sharing the world and motion, without shape, sprite or bounds."""
        clone = _copy.copy(self)
        clone.type = GameObjectType(self.type.name)
        clone.shape = None
        clone.sprite = None
        clone.bounding_shape = None
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type.name!r}, position={self.position!r})"