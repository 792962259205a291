"""The game world: holds objects, finds collisions and informs listeners."""

from __future__ import annotations

import weakref
from collections import deque
from typing import Any

from asteroidz.listeners import GameWorldListener


class GameWorld:
    """A wrapping rectangular world centred on the origin."""

    def __init__(self, width: int = 200, height: int = 200) -> None:
        self.width = width
        self.height = height
        self._objects: list[Any] = []
        self._collisions: dict[Any, list[Any]] = {}
        self._to_remove: deque[weakref.ReferenceType[Any]] = deque()
        self._listeners: list[GameWorldListener] = []

    @property
    def objects(self) -> tuple[Any, ...]:
        """The objects currently in the world, in the order they were added."""
        return tuple(self._objects)

    def __contains__(self, obj: object) -> bool:
        return any(o is obj for o in self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def update(self, t: int) -> None:
        """Advance every object by ``t`` ms, resolve collisions and flagged removals."""
        self.update_objects(t)
        self.update_collisions(t)
        while self._to_remove:
            ref = self._to_remove.popleft()
            self.remove_object(ref())
        self.fire_world_updated()

    def add_object(self, obj: Any) -> None:
        """Add ``obj`` to the world and tell the listeners."""
        self._objects.append(obj)
        self._collisions[obj] = []
        obj.world = self
        self.fire_object_added(obj)

    def remove_object(self, obj: Any) -> None:
        """Remove ``obj`` from the world and tell the listeners; None is ignored."""
        if obj is None:
            return
        self._objects = [o for o in self._objects if o is not obj]
        self._collisions.pop(obj, None)
        obj.world = None
        self.fire_object_removed(obj)

    def flag_for_removal(self, obj: Any) -> None:
        """Remove ``obj`` at the end of the current update."""
        self._to_remove.append(weakref.ref(obj))

    def get_collisions(self, obj: Any) -> list[Any]:
        """The objects ``obj`` collided with in the last update."""
        return list(self._collisions.setdefault(obj, []))

    def add_listener(self, listener: GameWorldListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: GameWorldListener) -> None:
        self._listeners = [l for l in self._listeners if l is not listener]

    def fire_world_updated(self) -> None:
        for listener in list(self._listeners):
            listener.on_world_updated(self)

    def fire_object_added(self, obj: Any) -> None:
        for listener in list(self._listeners):
            listener.on_object_added(self, obj)

    def fire_object_removed(self, obj: Any) -> None:
        for listener in list(self._listeners):
            listener.on_object_removed(self, obj)

    def update_objects(self, t: int) -> None:
        """Advance every object by ``t`` milliseconds."""
        for obj in list(self._objects):
            obj.update(t)

    def update_collisions(self, t: int) -> None:
        """Recompute every object's collisions and let each react to its own."""
        for hits in self._collisions.values():
            hits.clear()
        for first, hits in self._collisions.items():
            for second in self._collisions:
                if second is not first and first.collision_test(second):
                    hits.append(second)
        for obj in list(self._collisions):
            hits = self._collisions.get(obj)
            if hits:
                obj.on_collision(list(hits))

    def wrap_xy(self, x: float, y: float) -> tuple[float, float]:
        """Bring a point that has left the world back in from the opposite edge."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("world dimensions must be positive to wrap positions")
        half_w = int(self.width / 2)
        half_h = int(self.height / 2)
        while x > half_w:
            x -= self.width
        while y > half_h:
            y -= self.height
        while x < -half_w:
            x += self.width
        while y < -half_h:
            y += self.height
        return x, y