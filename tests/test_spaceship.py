import pytest

from asteroidz.bounding import BoundingSphere
from asteroidz.entities import Shield
from asteroidz.gameobject import GameObject
from asteroidz.geometry import Vector3
from asteroidz.spaceship import (
    DEFAULT_BULLET_SPEED,
    SHIELD_RADIUS,
    SHIELD_SCALE,
    Spaceship,
)
from asteroidz.world import GameWorld


def _with_sphere(obj, radius=5.0):
    obj.bounding_shape = BoundingSphere(obj, radius)
    return obj


def test_new_ship_defaults():
    ship = Spaceship()
    assert ship.type.name == "Spaceship"
    assert ship.bullet_speed == DEFAULT_BULLET_SPEED
    assert ship.thrust_amount == 0.0
    assert ship.is_hit is False
    assert ship.shield is None


def test_thrust_along_heading():
    ship = Spaceship()
    ship.thrust(10.0)
    assert ship.acceleration == Vector3(10.0, 0.0, 0.0)
    assert ship.thrust_amount == 10.0
    ship.angle = 90.0
    ship.thrust(10.0)
    assert ship.acceleration.x == pytest.approx(0.0, abs=1e-9)
    assert ship.acceleration.y == pytest.approx(10.0)


def test_thrust_keeps_z_acceleration():
    ship = Spaceship(acceleration=Vector3(0.0, 0.0, 2.0), angle=45.0)
    ship.thrust(3.0)
    assert ship.acceleration.z == 2.0
    assert (ship.acceleration.x ** 2 + ship.acceleration.y ** 2) == pytest.approx(9.0)


def test_rotate_sets_rotation():
    ship = Spaceship()
    ship.rotate(-45.0)
    assert ship.rotation == -45.0


def test_increase_bullet_speed():
    ship = Spaceship()
    before = ship.bullet_speed
    ship.increase_bullet_speed(5)
    assert ship.bullet_speed == before + 5


def test_create_shield_requires_world():
    with pytest.raises(RuntimeError):
        Spaceship().create_shield(1000)


def test_create_shield_adds_shield_to_world():
    world = GameWorld()
    ship = Spaceship(position=Vector3(5.0, 6.0, 0.0))
    world.add_object(ship)
    shield = ship.create_shield(1000)
    assert ship.shield is shield
    assert shield in world
    assert shield.position == ship.position
    assert shield.bounding_shape.radius == SHIELD_RADIUS
    assert shield.scale == SHIELD_SCALE
    assert shield.active is True
    assert shield.lifespan == 1000


def test_shield_follows_ship():
    world = GameWorld()
    ship = Spaceship(velocity=Vector3(10.0, 0.0, 0.0))
    world.add_object(ship)
    ship.create_shield(5000)
    ship.update(1000)
    assert ship.shield.position == ship.position
    assert ship.position.x == pytest.approx(10.0)


def test_inactive_shield_removed_on_update():
    world = GameWorld()
    ship = Spaceship()
    world.add_object(ship)
    shield = ship.create_shield(100)
    shield.active = False
    ship.update(16)
    assert shield not in world
    assert ship in world


def test_hide_and_show_shield():
    world = GameWorld()
    ship = Spaceship()
    world.add_object(ship)
    shield = ship.create_shield(5000)
    ship.set_shield_visibility(False)
    world.update(0)
    assert shield not in world
    shield.active = False
    ship.set_shield_visibility(True)
    assert shield in world
    assert shield.active is True


def test_set_shield_visibility_without_shield_raises():
    world = GameWorld()
    ship = Spaceship()
    world.add_object(ship)
    with pytest.raises(RuntimeError):
        ship.set_shield_visibility(True)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("AlienBullet", True),
        ("AlienSpaceship", True),
        ("Asteroid", True),
        ("MiniAsteroid", True),
        ("Bullet", False),
        ("LifeBonus", False),
    ],
)
def test_collision_targets(name, expected):
    ship = _with_sphere(Spaceship())
    other = _with_sphere(GameObject(name))
    assert ship.collision_test(other) is expected


def test_collision_test_clears_hit_flag():
    ship = _with_sphere(Spaceship())
    ship.is_hit = True
    other = GameObject("Asteroid")
    assert ship.collision_test(other) is False
    assert ship.is_hit is False


def test_fatal_collision_removes_ship_and_shield():
    world = GameWorld()
    ship = Spaceship(health=3)
    world.add_object(ship)
    shield = ship.create_shield(5000)
    ship.on_collision([GameObject("Asteroid")])
    assert ship.health == 0
    assert ship.is_hit is True
    world.update(0)
    assert ship not in world
    assert shield not in world


def test_alien_bullet_costs_one_health():
    world = GameWorld()
    ship = Spaceship(health=3)
    world.add_object(ship)
    ship.create_shield(5000)
    ship.on_collision([GameObject("AlienBullet"), GameObject("AlienBullet")])
    assert ship.health == 3 - 2
    world.update(0)
    assert ship in world
    assert ship.shield not in world
    assert isinstance(ship.shield, Shield)