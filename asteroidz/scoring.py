"""Score and lives bookkeeping driven by game world events."""

from __future__ import annotations

from typing import Any

from asteroidz.listeners import GameWorldListener, PlayerListener, ScoreListener
from asteroidz.object_type import GameObjectType

ASTEROID_POINTS = 5
MINI_ASTEROID_POINTS = 10
ALIEN_SPACESHIP_POINTS = 100
STARTING_LIVES = 3

_POINTS = {
    GameObjectType("Asteroid"): ASTEROID_POINTS,
    GameObjectType("MiniAsteroid"): MINI_ASTEROID_POINTS,
    GameObjectType("AlienSpaceship"): ALIEN_SPACESHIP_POINTS,
}

_SPACESHIP = GameObjectType("Spaceship")
_LIFE_BONUS = GameObjectType("LifeBonus")
_SHIELD_POWER_UP = GameObjectType("ShieldPowerUp")
_BULLET_UPGRADE = GameObjectType("BulletUpgrade")


class ScoreKeeper(GameWorldListener):
    """Awards points when asteroids and aliens leave the world.

    ``world`` is the world this keeper last heard from.
    """

    def __init__(self) -> None:
        self.score = 0
        self.world: Any = None
        self._listeners: list[ScoreListener] = []

    def on_world_updated(self, world: Any) -> None:
        """Remember the world; updates do not affect the score."""
        self.world = world

    def on_object_added(self, world: Any, obj: Any) -> None:
        """Remember the world; new objects do not affect the score."""
        self.world = world

    def on_object_removed(self, world: Any, obj: Any) -> None:
        """Add the points ``obj`` is worth, if any, and announce the new score."""
        self.world = world
        points = _POINTS.get(obj.type)
        if points is not None:
            self.score += points
            self.fire_score_changed()

    def add_listener(self, listener: ScoreListener) -> None:
        self._listeners.append(listener)

    def fire_score_changed(self) -> None:
        for listener in list(self._listeners):
            listener.on_score_changed(self.score)


class Player(GameWorldListener):
    """Tracks the player's lives, pick-ups and hits on both ships.

    ``enemy`` is expected to expose ``colliding`` and ``life``; ``spaceship``
    exposes ``is_hit`` and ``health``.  ``world`` is the world last heard from.
    """

    def __init__(self) -> None:
        self.lives = STARTING_LIVES
        self.enemy: Any = None
        self.spaceship: Any = None
        self.world: Any = None
        self._listeners: list[PlayerListener] = []

    def on_world_updated(self, world: Any) -> None:
        """Report hits on the enemy and on the player's ship."""
        self.world = world
        if self.enemy is not None and self.enemy.colliding:
            self.fire_enemy_hit()
        if self.spaceship is not None and self.spaceship.is_hit:
            self.fire_player_hit()

    def on_object_added(self, world: Any, obj: Any) -> None:
        """Remember the world; new objects do not concern the player."""
        self.world = world

    def on_object_removed(self, world: Any, obj: Any) -> None:
        """Count lost ships and collected pick-ups."""
        self.world = world
        if obj.type == _SPACESHIP:
            self.lives -= 1
            self.fire_player_killed()
        if obj.type == _LIFE_BONUS:
            self.lives += 1
            self.fire_bonus_picked()
        if obj.type == _SHIELD_POWER_UP:
            self.fire_shield_picked()
        if obj.type == _BULLET_UPGRADE:
            self.fire_bullet_upgrade_picked()

    def add_listener(self, listener: PlayerListener) -> None:
        self._listeners.append(listener)

    def fire_player_killed(self) -> None:
        for listener in list(self._listeners):
            listener.on_player_killed(self.lives)

    def fire_bonus_picked(self) -> None:
        for listener in list(self._listeners):
            listener.on_bonus_picked(self.lives)

    def fire_shield_picked(self) -> None:
        for listener in list(self._listeners):
            listener.on_shield_picked()

    def fire_bullet_upgrade_picked(self) -> None:
        for listener in list(self._listeners):
            listener.on_bullet_upgrade_picked()

    def fire_enemy_hit(self) -> None:
        for listener in list(self._listeners):
            listener.on_enemy_hit(self.enemy.life)

    def fire_player_hit(self) -> None:
        for listener in list(self._listeners):
            listener.on_player_hit(self.spaceship.health)