"""Interfaces for objects that react to game, input and timer events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class GameWorldListener(ABC):
    """Notified when a game world updates, gains or loses an object."""

    @abstractmethod
    def on_world_updated(self, world: Any) -> None:
        """Called once the world has finished an update."""

    @abstractmethod
    def on_object_added(self, world: Any, obj: Any) -> None:
        """Called after ``obj`` has been added to ``world``."""

    @abstractmethod
    def on_object_removed(self, world: Any, obj: Any) -> None:
        """Called after ``obj`` has been removed from ``world``."""


class PlayerListener(ABC):
    """Notified about the player's lives, pick-ups and hits."""

    @abstractmethod
    def on_player_killed(self, lives_left: int) -> None:
        """The player's ship was destroyed."""

    @abstractmethod
    def on_bonus_picked(self, lives: int) -> None:
        """An extra life was picked up."""

    @abstractmethod
    def on_shield_picked(self) -> None:
        """A shield power-up was picked up."""

    @abstractmethod
    def on_bullet_upgrade_picked(self) -> None:
        """A bullet upgrade was picked up."""

    @abstractmethod
    def on_enemy_hit(self, life_left: int) -> None:
        """The enemy was hit and has ``life_left`` remaining."""

    @abstractmethod
    def on_player_hit(self, health: int) -> None:
        """The player was hit and has ``health`` remaining."""


class ScoreListener(ABC):
    """Notified when the score changes."""

    @abstractmethod
    def on_score_changed(self, score: int) -> None:
        """The score is now ``score``."""


class BonusListener(ABC):
    """Notified when a bonus is picked up."""

    @abstractmethod
    def on_bonus_picked(self) -> None:
        """A bonus was picked up."""


class Weapon(ABC):
    """Something that can shoot."""

    @abstractmethod
    def shoot(self) -> None:
        """Fire once."""


class TimerListener(ABC):
    """Notified when a timer it set expires."""

    @abstractmethod
    def on_timer(self, value: int) -> None:
        """The timer registered with ``value`` fired."""


class KeyboardListener(ABC):
    """Notified about key presses and releases."""

    @abstractmethod
    def on_key_pressed(self, key: int, x: int, y: int) -> None:
        """An ordinary key was pressed."""

    @abstractmethod
    def on_key_released(self, key: int, x: int, y: int) -> None:
        """An ordinary key was released."""

    @abstractmethod
    def on_special_key_pressed(self, key: int, x: int, y: int) -> None:
        """A special key (arrows, function keys) was pressed."""

    @abstractmethod
    def on_special_key_released(self, key: int, x: int, y: int) -> None:
        """A special key was released."""


class MouseListener(ABC):
    """Notified about mouse movement and buttons."""

    @abstractmethod
    def on_mouse_dragged(self, x: int, y: int) -> None:
        """The mouse moved with a button held."""

    @abstractmethod
    def on_mouse_button(self, button: int, state: int, x: int, y: int) -> None:
        """A mouse button changed state."""

    @abstractmethod
    def on_mouse_moved(self, x: int, y: int) -> None:
        """The mouse moved with no button held."""


class WindowListener:
    """Notified about window size and visibility.

    By default the listener remembers the last size and visibility it was told of.
    """

    size: tuple[int, int] | None = None
    visibility: int | None = None

    def on_window_reshaped(self, w: int, h: int) -> None:
        """The window now measures ``w`` by ``h``."""
        self.size = (w, h)

    def on_window_visible(self, visibility: int) -> None:
        """The window's visibility changed."""
        self.visibility = visibility