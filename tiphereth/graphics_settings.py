"""Window and rendering settings stored in a small text file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import pygame

_FALLBACK_RESOLUTION = (800, 600)
_SETTING_COUNT = 6

PathLike = Union[str, Path]


def _desktop_mode() -> tuple[int, int]:
    """The desktop resolution if the display is up, otherwise a fallback."""
    if pygame.display.get_init():
        sizes = pygame.display.get_desktop_sizes()
        if sizes:
            width, height = sizes[0]
            return (int(width), int(height))
    return _FALLBACK_RESOLUTION


def _fullscreen_modes() -> list[tuple[int, int]]:
    """The fullscreen modes the display offers, or none if it is not up."""
    if pygame.display.get_init():
        modes = pygame.display.list_modes()
        if isinstance(modes, list):
            return [(int(w), int(h)) for w, h in modes]
    return []


def _parse_bool(token: str) -> bool:
    if token == "0":
        return False
    if token == "1":
        return True
    raise ValueError(f"expected 0 or 1, got {token!r}")


@dataclass
class GraphicsSettings:
    """Resolution, window mode and frame limits.

    The file holds the title on its first line, followed by width, height,
    fullscreen flag, frame-rate limit, vsync flag and antialiasing level.
    """

    title: str = "DEFAULT"
    resolution: tuple[int, int] = field(default_factory=_desktop_mode)
    fullscreen: bool = False
    vsync: bool = False
    framerate_limit: int = 500
    antialiasing_level: int = 0
    video_modes: list[tuple[int, int]] = field(default_factory=_fullscreen_modes)

    def save_to_file(self, path: PathLike) -> None:
        """Write the settings; raises OSError if the file can't be written."""
        width, height = self.resolution
        lines = [
            self.title,
            f"{width} {height}",
            str(int(self.fullscreen)),
            str(self.framerate_limit),
            str(int(self.vsync)),
            str(self.antialiasing_level),
        ]
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")

    def load_from_file(self, path: PathLike) -> None:
        """Read the settings; raises OSError if unreadable, ValueError if malformed."""
        text = Path(path).read_text(encoding="utf-8")
        title, _, rest = text.partition("\n")
        tokens = rest.split()
        if len(tokens) < _SETTING_COUNT:
            raise ValueError(f"incomplete graphics settings in {path}")
        try:
            width = int(tokens[0])
            height = int(tokens[1])
            fullscreen = _parse_bool(tokens[2])
            framerate_limit = int(tokens[3])
            vsync = _parse_bool(tokens[4])
            antialiasing_level = int(tokens[5])
        except ValueError as exc:
            raise ValueError(f"malformed graphics settings in {path}") from exc

        self.title = title.rstrip("\r")
        self.resolution = (width, height)
        self.fullscreen = fullscreen
        self.framerate_limit = framerate_limit
        self.vsync = vsync
        self.antialiasing_level = antialiasing_level