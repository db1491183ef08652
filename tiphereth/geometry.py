"""Rectangles, sprites and views used by the game logic.

Drawing goes through a render target: any object that offers
``draw_rect(rect, fill, outline, thickness)`` and ``draw_sprite(sprite)``.
Colours are ``(r, g, b, a)`` tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

Vector = tuple[float, float]


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle with float coordinates."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def _span_x(self) -> tuple[float, float]:
        end = self.left + self.width
        return min(self.left, end), max(self.left, end)

    def _span_y(self) -> tuple[float, float]:
        end = self.top + self.height
        return min(self.top, end), max(self.top, end)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; right and bottom edges are excluded."""
        min_x, max_x = self._span_x()
        min_y, max_y = self._span_y()
        return min_x <= x < max_x and min_y <= y < max_y

    def intersects(self, other: FloatRect) -> bool:
        """Whether the two rectangles overlap with a non-empty area."""
        a_min_x, a_max_x = self._span_x()
        a_min_y, a_max_y = self._span_y()
        b_min_x, b_max_x = other._span_x()
        b_min_y, b_max_y = other._span_y()
        left = max(a_min_x, b_min_x)
        right = min(a_max_x, b_max_x)
        top = max(a_min_y, b_min_y)
        bottom = min(a_max_y, b_max_y)
        return left < right and top < bottom


@dataclass(frozen=True)
class IntRect:
    """An axis-aligned rectangle with integer coordinates, used for texture areas."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Sprite:
    """A textured quad placed by position, origin and scale."""

    position: Vector = (0.0, 0.0)
    origin: Vector = (0.0, 0.0)
    scale: Vector = (1.0, 1.0)
    texture: Any = None
    texture_rect: Optional[IntRect] = None

    def move(self, dx: float, dy: float) -> None:
        x, y = self.position
        self.position = (x + dx, y + dy)

    def global_bounds(self) -> FloatRect:
        """The bounding box of the sprite in world coordinates."""
        if self.texture_rect is None:
            width = height = 0.0
        else:
            width = float(abs(self.texture_rect.width))
            height = float(abs(self.texture_rect.height))
        px, py = self.position
        ox, oy = self.origin
        sx, sy = self.scale
        xs = (px + sx * (0.0 - ox), px + sx * (width - ox))
        ys = (py + sy * (0.0 - oy), py + sy * (height - oy))
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


@dataclass
class View:
    """A 2D camera given by the world point at its centre and the area it shows."""

    center: Vector = (500.0, 500.0)
    size: Vector = (1000.0, 1000.0)

    def zoom(self, factor: float) -> None:
        w, h = self.size
        self.size = (w * factor, h * factor)

    def move(self, dx: float, dy: float) -> None:
        cx, cy = self.center
        self.center = (cx + dx, cy + dy)

    def map_pixel_to_coords(
        self, x: float, y: float, window_width: float, window_height: float
    ) -> Vector:
        """Convert a window pixel into world coordinates seen through this view."""
        cx, cy = self.center
        w, h = self.size
        world_x = cx - w / 2.0 + x * w / window_width
        world_y = cy - h / 2.0 + y * h / window_height
        return (world_x, world_y)