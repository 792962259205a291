"""Game-world core for an Asteroids-style arcade game: objects, collisions, scoring, sprites and events."""

__version__ = "0.1.0"

__all__ = [
    "bounding",
    "controller",
    "entities",
    "events",
    "gameobject",
    "geometry",
    "image",
    "listeners",
    "object_type",
    "scoring",
    "shape",
    "spaceship",
    "sprite",
    "world",
]