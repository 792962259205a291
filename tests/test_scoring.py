from types import SimpleNamespace

import pytest

from asteroidz.gameobject import GameObject
from asteroidz.listeners import PlayerListener, ScoreListener
from asteroidz.scoring import (
    ALIEN_SPACESHIP_POINTS,
    ASTEROID_POINTS,
    MINI_ASTEROID_POINTS,
    STARTING_LIVES,
    Player,
    ScoreKeeper,
)
from asteroidz.spaceship import Spaceship


class RecordingScores(ScoreListener):
    def __init__(self):
        self.scores = []

    def on_score_changed(self, score):
        self.scores.append(score)


class RecordingPlayer(PlayerListener):
    def __init__(self):
        self.events = []

    def on_player_killed(self, lives_left):
        self.events.append(("killed", lives_left))

    def on_bonus_picked(self, lives):
        self.events.append(("bonus", lives))

    def on_shield_picked(self):
        self.events.append(("shield",))

    def on_bullet_upgrade_picked(self):
        self.events.append(("upgrade",))

    def on_enemy_hit(self, life_left):
        self.events.append(("enemy", life_left))

    def on_player_hit(self, health):
        self.events.append(("hit", health))


@pytest.mark.parametrize(
    "name, points",
    [
        ("Asteroid", ASTEROID_POINTS),
        ("MiniAsteroid", MINI_ASTEROID_POINTS),
        ("AlienSpaceship", ALIEN_SPACESHIP_POINTS),
    ],
)
def test_score_awarded_for_removed_object(name, points):
    keeper = ScoreKeeper()
    listener = RecordingScores()
    keeper.add_listener(listener)
    keeper.on_object_removed(None, GameObject(name))
    assert keeper.score == points
    assert listener.scores == [points]


def test_score_accumulates():
    keeper = ScoreKeeper()
    listener = RecordingScores()
    keeper.add_listener(listener)
    keeper.on_object_removed(None, GameObject("Asteroid"))
    keeper.on_object_removed(None, GameObject("MiniAsteroid"))
    assert listener.scores == [ASTEROID_POINTS, ASTEROID_POINTS + MINI_ASTEROID_POINTS]


def test_other_objects_score_nothing():
    keeper = ScoreKeeper()
    listener = RecordingScores()
    keeper.add_listener(listener)
    keeper.on_object_removed(None, GameObject("Bullet"))
    keeper.on_object_added(None, GameObject("Asteroid"))
    keeper.on_world_updated(None)
    assert keeper.score == 0
    assert listener.scores == []


def test_player_starts_with_lives():
    assert Player().lives == STARTING_LIVES


def test_player_killed_loses_life():
    player = Player()
    listener = RecordingPlayer()
    player.add_listener(listener)
    player.on_object_removed(None, GameObject("Spaceship"))
    assert player.lives == STARTING_LIVES - 1
    assert listener.events == [("killed", STARTING_LIVES - 1)]


def test_life_bonus_adds_life():
    player = Player()
    listener = RecordingPlayer()
    player.add_listener(listener)
    player.on_object_removed(None, GameObject("LifeBonus"))
    assert player.lives == STARTING_LIVES + 1
    assert listener.events == [("bonus", STARTING_LIVES + 1)]


def test_pickups_reported():
    player = Player()
    listener = RecordingPlayer()
    player.add_listener(listener)
    player.on_object_removed(None, GameObject("ShieldPowerUp"))
    player.on_object_removed(None, GameObject("BulletUpgrade"))
    player.on_object_removed(None, GameObject("Asteroid"))
    assert listener.events == [("shield",), ("upgrade",)]
    assert player.lives == STARTING_LIVES


def test_world_update_reports_hits():
    player = Player()
    listener = RecordingPlayer()
    player.add_listener(listener)
    player.enemy = SimpleNamespace(colliding=True, life=7)
    ship = Spaceship(health=2)
    ship.is_hit = True
    player.spaceship = ship
    player.on_world_updated(None)
    assert listener.events == [("enemy", 7), ("hit", 2)]


def test_world_update_quiet_without_hits():
    player = Player()
    listener = RecordingPlayer()
    player.add_listener(listener)
    player.enemy = SimpleNamespace(colliding=False, life=7)
    player.spaceship = Spaceship(health=2)
    player.on_world_updated(None)
    assert listener.events == []