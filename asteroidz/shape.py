"""Outline shapes read from plain text files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from asteroidz.geometry import Vector2, Vector3


@dataclass
class Shape:
    """A coloured polyline, closed when ``loop`` is true.

    The text form is a mode word (``loop`` closes the outline, anything else
    leaves it open), three colour components, then x y pairs.
    """

    loop: bool = False
    colour: Vector3 = Vector3()
    points: list[Vector2] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | Path) -> Shape:
        """Read a shape from the file at ``path``."""
        return cls.parse(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def parse(cls, text: str) -> Shape:
        """Build a shape from its text form; malformed text raises ValueError."""
        tokens = text.split()
        if len(tokens) < 4:
            raise ValueError("shape needs a mode word and three colour components")
        mode, *rest = tokens
        colour = Vector3(*(float(value) for value in rest[:3]))
        coords = [float(value) for value in rest[3:]]
        if len(coords) % 2:
            raise ValueError("shape points must come in x y pairs")
        points = [Vector2(x, y) for x, y in zip(coords[::2], coords[1::2])]
        return cls(mode == "loop", colour, points)