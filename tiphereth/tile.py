"""Single tiles of the world grid."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

from tiphereth.geometry import FloatRect, IntRect, Sprite, Vector


class TileType(IntEnum):
    DEFAULT = 0
    DAMAGING = 1
    DOODAD = 2


class Tile:
    """A square cell of a tile map, cut out of a texture sheet."""

    def __init__(
        self,
        grid_x: int = 0,
        grid_y: int = 0,
        grid_size: float = 0.0,
        texture: Any = None,
        texture_rect: Optional[IntRect] = None,
        collision: bool = False,
        tile_type: int = TileType.DEFAULT,
    ) -> None:
        self.grid_size = float(grid_size)
        self.texture = texture
        self.texture_rect = texture_rect if texture_rect is not None else IntRect()
        self.collision = bool(collision)
        self.tile_type = int(tile_type)
        position = (float(grid_x) * self.grid_size, float(grid_y) * self.grid_size)
        width = self.texture_rect.width
        height = self.texture_rect.height
        scale = (
            self.grid_size / width if width else 1.0,
            self.grid_size / height if height else 1.0,
        )
        self.sprite = Sprite(
            position=position,
            scale=scale,
            texture=texture,
            texture_rect=self.texture_rect,
        )

    @property
    def position(self) -> Vector:
        return self.sprite.position

    def update(self) -> None:
        """Tiles are static; nothing changes from frame to frame."""

    def render(self, target: Any) -> None:
        target.draw_sprite(self.sprite)

    def as_string(self) -> str:
        """The texture offset, collision flag and type as saved in map files."""
        return (
            f"{self.texture_rect.left} {self.texture_rect.top} "
            f"{int(self.collision)} {self.tile_type}"
        )

    def intersects(self, bounds: FloatRect) -> bool:
        return self.global_bounds().intersects(bounds)

    def global_bounds(self) -> FloatRect:
        x, y = self.position
        return FloatRect(x, y, self.grid_size, self.grid_size)