import pytest

from asteroidz.controller import MovementController
from asteroidz.gameobject import GameObject
from asteroidz.geometry import Vector3


def test_new_controller_has_no_acceleration():
    obj = GameObject("Alien")
    controller = MovementController(obj)
    assert controller.acceleration == 0.0
    assert controller.object is obj


def test_accelerate_along_zero_heading():
    obj = GameObject("Alien")
    controller = MovementController(obj)
    controller.accelerate(5.0)
    assert obj.acceleration == Vector3(5.0, 0.0, 0.0)
    assert controller.acceleration == 5.0


def test_accelerate_along_right_angle_heading():
    obj = GameObject("Alien", angle=90.0)
    MovementController(obj).accelerate(5.0)
    assert obj.acceleration.x == pytest.approx(0.0, abs=1e-9)
    assert obj.acceleration.y == pytest.approx(5.0)
    assert obj.acceleration.z == 0.0


@pytest.mark.parametrize("angle", [0.0, 33.0, 180.0, 271.5])
@pytest.mark.parametrize("a", [-2.0, 0.0, 7.5])
def test_acceleration_magnitude_matches(angle, a):
    obj = GameObject("Alien", angle=angle)
    MovementController(obj).accelerate(a)
    assert obj.acceleration.length() == pytest.approx(abs(a))


def test_rotate_sets_rotation_and_reaims():
    obj = GameObject("Alien")
    controller = MovementController(obj)
    controller.accelerate(4.0)
    obj.angle = 180.0
    controller.rotate(15.0)
    assert obj.rotation == 15.0
    assert obj.acceleration.x == pytest.approx(-4.0)
    assert obj.acceleration.y == pytest.approx(0.0, abs=1e-9)
    assert controller.acceleration == 4.0


def test_rotate_without_acceleration_leaves_zero_acceleration():
    obj = GameObject("Alien", acceleration=Vector3(1.0, 1.0, 1.0))
    controller = MovementController(obj)
    controller.rotate(-30.0)
    assert obj.rotation == -30.0
    assert obj.acceleration == Vector3(0.0, 0.0, 0.0)