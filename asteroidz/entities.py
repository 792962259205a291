"""Pick-ups, asteroid fragments, shields and the alien's sensing field."""

from __future__ import annotations

import math
import random
from typing import Any, Iterable, Protocol

from asteroidz.gameobject import GameObject
from asteroidz.geometry import Vector3, deg2rad
from asteroidz.object_type import GameObjectType

RAND_MAX = 32767
BONUS_LIFESPAN = 5000
MINI_ASTEROID_SPEED = 30.0

_SPACESHIP = GameObjectType("Spaceship")
_SPACESHIP_CAPITALISED = GameObjectType("SpaceShip")
_BULLET = GameObjectType("Bullet")
_SHIELD = GameObjectType("Shield")
_ALIEN_SPACESHIP = GameObjectType("AlienSpaceship")


class RandomSource(Protocol):
    """Anything with ``randint`` like :class:`random.Random`."""

    def randint(self, a: int, b: int) -> int: ...


def _rand(rng: RandomSource) -> int:
    return rng.randint(0, RAND_MAX)


def _bounds_overlap(obj: GameObject, other: GameObject) -> bool:
    if obj.bounding_shape is None or other.bounding_shape is None:
        return False
    return obj.bounding_shape.collision_test(other.bounding_shape)


class _RelocatingBonus(GameObject):
    """A pick-up that jumps elsewhere once its lifespan runs out."""

    def __init__(self, type_name: str, rng: RandomSource | None) -> None:
        super().__init__(type_name)
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self.lifespan = BONUS_LIFESPAN

    def _relocate(self) -> None:
        x = _rand(self._rng) // 2
        y = _rand(self._rng) // 2
        self.position = Vector3(float(x), float(y), 0.0)

    def collision_test(self, other: GameObject) -> bool:
        """Collides only with the player's spaceship."""
        if other.type != _SPACESHIP:
            return False
        return _bounds_overlap(self, other)

    def on_collision(self, objects: Iterable[GameObject]) -> None:
        """Being touched means being picked up: leave the world."""
        self.world.flag_for_removal(self)

    def update(self, t: int) -> None:
        """Move, age by ``t`` ms, and relocate with a fresh lifespan when expired."""
        super().update(t)
        self.lifespan = max(self.lifespan - t, 0)
        if self.lifespan == 0:
            self._relocate()
            self.lifespan = BONUS_LIFESPAN
            super().update(t)


class LifeBonus(_RelocatingBonus):
    """An extra life that appears at a random spot."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        super().__init__("LifeBonus", rng)
        self._relocate()

    def collision_test(self, other: GameObject) -> bool:
        return super().collision_test(other)

    def on_collision(self, objects: Iterable[GameObject]) -> None:
        super().on_collision(objects)

    def update(self, t: int) -> None:
        super().update(t)


class ShieldPowerUp(_RelocatingBonus):
    """A shield pick-up that first appears near the origin."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        super().__init__("ShieldPowerUp", rng)
        x = _rand(self._rng) % 100
        y = _rand(self._rng) % 100
        self.position = Vector3(float(x), float(y), 0.0)
        self.angle = 180.0

    def collision_test(self, other: GameObject) -> bool:
        return super().collision_test(other)

    def on_collision(self, objects: Iterable[GameObject]) -> None:
        super().on_collision(objects)

    def update(self, t: int) -> None:
        super().update(t)


class MiniAsteroid(GameObject):
    """A fragment flying off from where another object was, in a random direction."""

    def __init__(self, source: GameObject, rng: RandomSource | None = None) -> None:
        super().__init__("MiniAsteroid")
        rng = rng if rng is not None else random.Random()
        self.position = source.position
        self.angle = float(_rand(rng) % 360)
        self.rotation = float(_rand(rng) % 90)
        heading = deg2rad(self.angle)
        self.velocity = Vector3(
            MINI_ASTEROID_SPEED * math.cos(heading),
            MINI_ASTEROID_SPEED * math.sin(heading),
            0.0,
        )

    def collision_test(self, other: GameObject) -> bool:
        """Collides with ships named ``SpaceShip``, bullets and shields."""
        if self.type == other.type:
            return False
        if other.type not in (_SPACESHIP_CAPITALISED, _BULLET, _SHIELD):
            return False
        return _bounds_overlap(self, other)

    def on_collision(self, objects: Iterable[GameObject]) -> None:
        """Any hit destroys the fragment."""
        self.world.flag_for_removal(self)


class Shield(GameObject):
    """A protective bubble that stays active for a limited time."""

    def __init__(self, position: Vector3, lifespan: int) -> None:
        super().__init__("Shield")
        self.position = position
        self.lifespan = lifespan
        self.active = True

    def collision_test(self, other: GameObject) -> bool:
        """Collides only with the alien spaceship."""
        if other.type != _ALIEN_SPACESHIP:
            return False
        return _bounds_overlap(self, other)

    def on_collision(self, objects: Iterable[GameObject]) -> None:
        """A shield is unaffected by what it touches."""

    def update(self, t: int) -> None:
        """Age by ``t`` ms; the shield goes inactive when its time is up."""
        self.lifespan = max(self.lifespan - t, 0)
        if self.lifespan == 0:
            self.active = False


class AlienAI(GameObject):
    """A sensing field that follows an alien ship and rouses it on contact.

    On collision the alien's ``engaged`` and ``moving`` attributes are set.
    """

    def __init__(self, alien_spaceship: Any) -> None:
        super().__init__("AlienAI")
        self.alien_spaceship = alien_spaceship
        self.position = alien_spaceship.position

    def update(self, t: int) -> None:
        """Move to the alien's position, then advance normally."""
        self.position = self.alien_spaceship.position
        super().update(t)

    def collision_test(self, other: GameObject) -> bool:
        """Senses bullets and the player's spaceship."""
        if other.type != _BULLET and other.type != _SPACESHIP:
            return False
        return _bounds_overlap(self, other)

    def on_collision(self, objects: Iterable[GameObject]) -> None:
        """Make the alien engage and start moving."""
        self.alien_spaceship.engaged = True
        self.alien_spaceship.moving = True