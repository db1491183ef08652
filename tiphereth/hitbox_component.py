"""A collision box that follows a sprite at a fixed offset."""

from __future__ import annotations

from typing import Any

from tiphereth.geometry import FloatRect, Sprite, Vector

_OUTLINE_COLOR = (0, 255, 0, 255)
_FILL_COLOR = (0, 0, 0, 0)


class HitboxComponent:
    """Keeps a rectangle at ``sprite.position + offset``."""

    def __init__(
        self,
        sprite: Sprite,
        offset_x: float,
        offset_y: float,
        width: float,
        height: float,
    ) -> None:
        self.sprite = sprite
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.width = width
        self.height = height
        self.position: Vector = (0.0, 0.0)
        self.update()

    def update(self) -> None:
        x, y = self.sprite.position
        self.position = (x + self.offset_x, y + self.offset_y)

    def render(self, target: Any) -> None:
        target.draw_rect(self.global_bounds(), _FILL_COLOR, _OUTLINE_COLOR, -1.0)

    def intersects(self, rect: FloatRect) -> bool:
        return self.global_bounds().intersects(rect)

    def global_bounds(self) -> FloatRect:
        x, y = self.position
        return FloatRect(x, y, self.width, self.height)

    def next_position(self, velocity: Vector) -> FloatRect:
        """The box as it would be after moving by ``velocity``."""
        x, y = self.position
        vx, vy = velocity
        return FloatRect(x + vx, y + vy, self.width, self.height)

    def set_position(self, x: float, y: float) -> None:
        """Place the box and move the sprite with it."""
        self.position = (x, y)
        self.sprite.position = (x - self.offset_x, y - self.offset_y)