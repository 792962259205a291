import pytest

from asteroidz.gameobject import GameObject
from asteroidz.geometry import Vector3
from asteroidz.listeners import GameWorldListener
from asteroidz.world import GameWorld


class Recorder(GameWorldListener):
    def __init__(self):
        self.events = []

    def on_world_updated(self, world):
        self.events.append(("updated", None))

    def on_object_added(self, world, obj):
        self.events.append(("added", obj))

    def on_object_removed(self, world, obj):
        self.events.append(("removed", obj))


class Hitter(GameObject):
    """Collides with every object of type 'Target'."""

    def __init__(self, remove_on_hit=False):
        super().__init__("Hitter")
        self.seen = []
        self.remove_on_hit = remove_on_hit

    def collision_test(self, other):
        return other.type.name == "Target"

    def on_collision(self, objects):
        self.seen.append(list(objects))
        if self.remove_on_hit:
            self.world.flag_for_removal(self)


def test_default_size():
    world = GameWorld()
    assert (world.width, world.height) == (200, 200)


def test_add_object_sets_world_and_notifies():
    world = GameWorld()
    rec = Recorder()
    world.add_listener(rec)
    obj = GameObject("Target")
    world.add_object(obj)
    assert obj.world is world
    assert obj in world
    assert rec.events == [("added", obj)]


def test_remove_object_clears_world_and_notifies():
    world = GameWorld()
    rec = Recorder()
    obj = GameObject("Target")
    world.add_object(obj)
    world.add_listener(rec)
    world.remove_object(obj)
    assert obj.world is None
    assert obj not in world
    assert rec.events == [("removed", obj)]


def test_remove_none_is_ignored():
    world = GameWorld()
    rec = Recorder()
    world.add_listener(rec)
    world.remove_object(None)
    assert rec.events == []


def test_removed_listener_gets_nothing():
    world = GameWorld()
    rec = Recorder()
    world.add_listener(rec)
    world.remove_listener(rec)
    world.add_object(GameObject("Target"))
    assert rec.events == []


def test_collisions_are_found_and_reported():
    world = GameWorld()
    hitter = Hitter()
    target = GameObject("Target")
    world.add_object(hitter)
    world.add_object(target)
    world.update(0)
    assert hitter.seen == [[target]]
    assert world.get_collisions(hitter) == [target]
    assert world.get_collisions(target) == []


def test_flagged_object_removed_after_update():
    world = GameWorld()
    rec = Recorder()
    hitter = Hitter(remove_on_hit=True)
    target = GameObject("Target")
    world.add_object(hitter)
    world.add_object(target)
    world.add_listener(rec)
    world.update(0)
    assert hitter not in world
    assert target in world
    assert rec.events == [("removed", hitter), ("updated", None)]


def test_unknown_object_has_no_collisions():
    world = GameWorld()
    assert world.get_collisions(GameObject("Stray")) == []


def test_update_moves_objects():
    world = GameWorld()
    obj = GameObject("Target", velocity=Vector3(10, 0, 0))
    world.add_object(obj)
    world.update(1000)
    assert obj.position.x == pytest.approx(10.0)


@pytest.mark.parametrize("x,y", [(150.0, 0.0), (-370.0, 250.0), (40.0, -101.0), (0.0, 0.0)])
def test_wrap_xy_stays_inside_and_shifts_by_whole_widths(x, y):
    world = GameWorld(200, 200)
    wx, wy = world.wrap_xy(x, y)
    assert -100 <= wx <= 100
    assert -100 <= wy <= 100
    assert (x - wx) % 200 == pytest.approx(0.0)
    assert (y - wy) % 200 == pytest.approx(0.0)


def test_wrap_xy_example():
    world = GameWorld(200, 200)
    assert world.wrap_xy(150.0, -150.0) == (-50.0, 50.0)


def test_wrap_xy_rejects_empty_world():
    world = GameWorld(0, 200)
    with pytest.raises(ValueError):
        world.wrap_xy(5.0, 5.0)