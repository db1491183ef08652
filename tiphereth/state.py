"""Base class for game screens and the data they share."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import pygame

from tiphereth.geometry import Vector, View
from tiphereth.graphics_settings import GraphicsSettings

logger = logging.getLogger(__name__)

MOUSE_LEFT = 0
MOUSE_RIGHT = 2

_FONT_SIZE = 30

PathLike = Union[str, Path]


class _PygameInput:
    """Reads the keyboard and mouse through pygame."""

    def is_key_pressed(self, key: int) -> bool:
        try:
            return bool(pygame.key.get_pressed()[key])
        except (pygame.error, IndexError):
            return False

    def is_mouse_pressed(self, button: int) -> bool:
        try:
            return bool(pygame.mouse.get_pressed()[button])
        except (pygame.error, IndexError):
            return False

    def mouse_position(self) -> tuple[int, int]:
        try:
            x, y = pygame.mouse.get_pos()
        except pygame.error:
            return (0, 0)
        return (int(x), int(y))


def _trunc_div(value: float, size: int) -> int:
    return int(int(value) / size)


@dataclass
class StateData:
    """What every state shares with the game.

    ``window`` is the render target, with a ``size`` of ``(width, height)``
    and a ``close()`` method. ``input`` offers ``is_key_pressed(key)``,
    ``is_mouse_pressed(button)`` and ``mouse_position()``. ``states`` is the
    stack of screens, topmost last.
    """

    window: Any
    gfx_settings: GraphicsSettings
    supported_keys: dict[str, int] = field(default_factory=dict)
    states: list = field(default_factory=list)
    grid_size: float = 32.0
    input: Any = field(default_factory=_PygameInput)
    config_dir: PathLike = "Config"
    assets_dir: PathLike = "assets"
    font_path: Optional[str] = "fonts/Lato-Bold.ttf"
    map_file: PathLike = "test.mp"


class State(ABC):
    """A screen of the game: it reads input, updates and draws itself."""

    def __init__(self, state_data: StateData) -> None:
        self.state_data = state_data
        self.window = state_data.window
        self.supported_keys = state_data.supported_keys
        self.states = state_data.states
        self.input = state_data.input
        self.quit = False
        self.paused = False
        self.key_time = 0.0
        self.key_time_max = 10.0
        self.grid_size = state_data.grid_size
        self.key_binds: dict[str, int] = {}
        self.textures: dict[str, Any] = {}
        self.mouse_pos_screen: tuple[int, int] = (0, 0)
        self.mouse_pos_window: tuple[int, int] = (0, 0)
        self.mouse_pos_view: Vector = (0.0, 0.0)
        self.mouse_pos_grid: tuple[int, int] = (0, 0)

    def consume_key_time(self) -> bool:
        """True, and restart the cooldown, if enough time passed since the last action."""
        if self.key_time >= self.key_time_max:
            self.key_time = 0.0
            return True
        return False

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""

    @abstractmethod
    def render(self, target: Any = None) -> None:
        """Draw the state on ``target``, or on the window when it is None."""

    @abstractmethod
    def update_input(self, dt: float) -> None:
        """React to the keys bound for this state."""

    def update_mouse_position(self, view: Optional[View] = None) -> None:
        """Record the mouse in window, world and grid coordinates."""
        position = self.input.mouse_position()
        self.mouse_pos_screen = position
        self.mouse_pos_window = position
        width, height = self.window.size
        seen_through = view if view is not None else self._default_view()
        self.mouse_pos_view = seen_through.map_pixel_to_coords(
            float(position[0]), float(position[1]), float(width), float(height)
        )
        cell = int(self.grid_size)
        vx, vy = self.mouse_pos_view
        self.mouse_pos_grid = (_trunc_div(vx, cell), _trunc_div(vy, cell))

    def end_state(self) -> None:
        self.quit = True

    def pause_state(self) -> None:
        self.paused = True

    def unpause_state(self) -> None:
        self.paused = False

    def update_key_time(self, dt: float) -> None:
        if self.key_time < self.key_time_max:
            self.key_time += 50.0 * dt

    def load_key_binds(self, path: PathLike) -> None:
        """Read ``action key-name`` pairs; a missing file leaves the binds empty.

        Raises KeyError for a key name the game does not support.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            return
        tokens = text.split()
        for action, key_name in zip(tokens[0::2], tokens[1::2]):
            self.key_binds[action] = self.supported_keys[key_name]

    def _default_view(self) -> View:
        width, height = (float(value) for value in self.window.size)
        return View(center=(width / 2.0, height / 2.0), size=(width, height))

    def _apply_view(self, target: Any, view: Optional[View] = None) -> None:
        setter = getattr(target, "set_view", None)
        if callable(setter):
            setter(view if view is not None else self._default_view())

    def _key_pressed(self, action: str) -> bool:
        return self.input.is_key_pressed(self.key_binds[action])

    def _config_path(self, name: str) -> Path:
        return Path(self.state_data.config_dir) / name

    def _asset_path(self, name: str) -> str:
        return str(Path(self.state_data.assets_dir) / name)

    def _load_texture(self, key: str, path: PathLike) -> Any:
        try:
            texture = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise OSError(f"texture not loaded: {path}") from exc
        self.textures[key] = texture
        return texture

    def _load_font(self) -> Any:
        path = self.state_data.font_path
        try:
            pygame.font.init()
            return pygame.font.Font(path, _FONT_SIZE)
        except (pygame.error, OSError) as exc:
            raise OSError(f"can not load font: {path}") from exc