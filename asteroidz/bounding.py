"""Bounding shapes used for collision tests between game objects."""

from __future__ import annotations

import weakref
from typing import Any

from asteroidz.object_type import GameObjectType


class BoundingShape:
    """A shape attached weakly to a game object; collides with nothing."""

    def __init__(self, type_name: str, game_object: Any = None) -> None:
        self.type = GameObjectType(type_name)
        self._ref: weakref.ReferenceType[Any] | None = None
        self.game_object = game_object

    @property
    def game_object(self) -> Any:
        """The object this shape bounds, or None once it has gone."""
        return self._ref() if self._ref is not None else None

    @game_object.setter
    def game_object(self, obj: Any) -> None:
        self._ref = weakref.ref(obj) if obj is not None else None

    def collision_test(self, other: BoundingShape) -> bool:
        """Whether this shape overlaps ``other``; never, for the plain shape."""
        return False


class BoundingSphere(BoundingShape):
    """A sphere centred on its object's position."""

    def __init__(self, game_object: Any = None, radius: float = 0.0) -> None:
        super().__init__("BoundingSphere", game_object)
        self.radius = float(radius)

    def collision_test(self, other: BoundingShape) -> bool:
        """True when ``other`` is a sphere no farther away than the sum of the radii."""
        if self.type != other.type:
            return False
        pos1 = self.game_object.position
        pos2 = other.game_object.position
        distance_sqr = (pos2 - pos1).length_sqr()
        reach = self.radius + other.radius  # type: ignore[attr-defined]
        return distance_sqr <= reach ** 2