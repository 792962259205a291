# asteroidz

The game-world core of an Asteroids-style arcade game: vectors, game objects,
a wrapping world with collision detection, pick-ups, the player's ship,
scoring, sprite frame timing, image data and event dispatch.

## Modules

- `asteroidz.geometry`: the immutable `Vector2` and `Vector3`, which support
  `+`, `-`, scalar `*` and `/`, `dot`, `length` and `length_sqr`. `Vector3`
  also has `cross` and `normalized`. There is also `Quaternion`, with `cross`
  (the Hamilton product, also `*`), `conjugate`, `inverse`, `norm`, `unit`,
  `rotate_vector` and `from_axis_angle`, and the helper `deg2rad`.
- `asteroidz.object_type`: `hash_name` computes an Adler-style 32-bit
  checksum of a type name. `GameObjectType` tags compare and hash by that
  checksum. Letters are lowered only inside whole 16-byte blocks of the name,
  so short names are case-sensitive: `"Bullet"` and `"bullet"` are different
  types.
- `asteroidz.gameobject`: `GameObject` has a position, a velocity, an
  acceleration, an angle in degrees, a rotation in degrees per second and a
  scale. `update(t)` advances the object by `t` milliseconds. Inside a world,
  the position wraps around the world's edges. Outside a world, the object is
  reset to the origin.
- `asteroidz.bounding`: `BoundingShape`, which never collides, and
  `BoundingSphere`, which collides with another sphere when the distance
  between the two is at most the sum of their radii. A shape holds its game
  object through a weak reference.
- `asteroidz.world`: `GameWorld`, 200 × 200 units by default and centred on
  the origin. On each `update(t)` it:
  1. advances every object;
  2. recomputes collisions and calls `on_collision` with each object's hits;
  3. removes the objects that were flagged with `flag_for_removal`;
  4. notifies its `GameWorldListener`s.

  `wrap_xy(x, y)` returns the wrapped coordinates.
- `asteroidz.entities`:
  - `LifeBonus` and `ShieldPowerUp` are pick-ups that collide only with a
    `"Spaceship"` and jump to a random spot every 5000 ms.
  - `MiniAsteroid` is a fragment that flies off at speed 30 in a random
    direction.
  - `Shield` goes inactive when its lifespan runs out.
  - `AlienAI` is a sensing field that follows an alien ship. On contact it
    sets the ship's `engaged` and `moving` attributes.

  The random pick-ups take an optional `random.Random`-like source.
- `asteroidz.spaceship`: `Spaceship`, with `thrust`, `rotate`,
  `create_shield`, `set_shield_visibility` and `increase_bullet_speed`. An
  alien bullet costs the ship one health point. Any other harmful hit sets its
  health to 0, and the ship is then flagged for removal.
- `asteroidz.controller`: `MovementController` accelerates any game object
  along its heading and sets its rotation.
- `asteroidz.scoring`: `ScoreKeeper` gives 5 points for an asteroid, 10 for a
  mini asteroid and 100 for an alien spaceship. `Player` starts with 3 lives
  and reports kills, pick-ups and hits to its `PlayerListener`s.
- `asteroidz.listeners`: the abstract interfaces `GameWorldListener`,
  `PlayerListener`, `ScoreListener`, `BonusListener`, `Weapon`,
  `TimerListener`, `KeyboardListener` and `MouseListener`. `WindowListener`
  is a concrete class that records the last size and visibility it was told
  of.
- `asteroidz.sprite`: `Sprite` steps through `animation.num_frames` frames at
  12 frames per second. It either loops or stops, in which case `animating`
  becomes false.
- `asteroidz.shape`: `Shape.parse(text)` and `Shape.load(path)` read a line
  shape. The text holds a mode word (`loop` closes the outline), three colour
  components and then x y pairs. Malformed text raises `ValueError`.
- `asteroidz.image`: `Image` holds RGBA bytes and has `from_file` (loaded
  with Pillow and mirrored left to right), `from_region`,
  `set_transparent_colour` and `pixel`. `ImageManager` keeps images by name,
  and the first image registered under a name is the one kept.
- `asteroidz.events`: `Window` forwards keyboard, mouse and window events to
  its listeners. Escape exits the program and F1 toggles full-screen mode.
  `Session` passes idle callbacks to its window when idling is enabled, and
  fires one-shot timers by key (`set_timer`, `on_timer`, `pending_timers`).

## Example

```python
from asteroidz.gameobject import GameObject
from asteroidz.geometry import Vector3
from asteroidz.world import GameWorld

world = GameWorld()
print(world.wrap_xy(150.0, -120.0))   # (-50.0, 80.0)

rock = GameObject("Asteroid", velocity=Vector3(10.0, 0.0, 0.0))
world.add_object(rock)
world.update(500)                     # half a second
print(rock.position)                  # Vector3(x=5.0, y=0.0, z=0.0)
```

## What it does not do

The package has no renderer, no audio, no main loop and no command to run.
It also has no classes for bullets, large asteroids or the alien spaceship.
Objects with those type names can be created with `GameObject` or a subclass
of it.

## Tests

Install the `test` extra and run `pytest`.