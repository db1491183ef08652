"""A layered grid of tiles with rendering, persistence and collision."""

from __future__ import annotations

import logging
from itertools import islice
from typing import Any, Iterator, Optional

import pygame

from tiphereth.entity import Entity
from tiphereth.geometry import FloatRect, IntRect
from tiphereth.tile import Tile, TileType

logger = logging.getLogger(__name__)

_COLLISION_FILL = (255, 0, 0, 50)
_COLLISION_OUTLINE = (255, 0, 0, 255)
_BOOL_TOKENS = {"0": False, "1": True}

TileRecord = tuple[int, int, int, int, int, bool, int]


def _load_texture(path: str) -> Optional[Any]:
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        logger.warning("tile map failed to load texture file: %s", path)
        return None


def _clamp(value: int, upper: int) -> int:
    if value < 0:
        return 0
    if value > upper:
        return upper
    return value


def _tile_records(tokens: Iterator[str]) -> Iterator[TileRecord]:
    """Yield tile records until the input ends or a record is malformed."""
    while True:
        record = list(islice(tokens, 7))
        if len(record) < 7:
            return
        try:
            x, y, z, tr_x, tr_y = (int(token) for token in record[:5])
            collision = _BOOL_TOKENS[record[5]]
            tile_type = int(record[6])
        except (ValueError, KeyError):
            return
        yield x, y, z, tr_x, tr_y, collision, tile_type


class TileMap:
    """Tiles stacked per cell and per layer, indexed ``grid[x][y][z]``."""

    def __init__(self, grid_size: float, width: int, height: int, texture_file: str) -> None:
        self.grid_size_f = float(grid_size)
        self.grid_size_i = int(self.grid_size_f)
        self.max_size_world_grid = (width, height)
        self.max_size_world = (float(width) * self.grid_size_f, float(height) * self.grid_size_f)
        self.layers = 1
        self.texture_file = texture_file
        self.grid: list[list[list[list[Tile]]]] = []
        self._deferred: list[Tile] = []
        self._build_grid()
        self.tile_sheet = _load_texture(texture_file)

    def _build_grid(self) -> None:
        width, height = self.max_size_world_grid
        self.grid = [
            [[[] for _ in range(self.layers)] for _ in range(height)] for _ in range(width)
        ]

    def _in_bounds(self, x: int, y: int, z: int) -> bool:
        width, height = self.max_size_world_grid
        return 0 <= x < width and 0 <= y < height and 0 <= z < self.layers

    def _visible_cells(
        self, grid_position: tuple[int, int], before_x: int, after_x: int, before_y: int, after_y: int
    ) -> Iterator[list[Tile]]:
        gx, gy = grid_position
        width, height = self.max_size_world_grid
        from_x, to_x = _clamp(gx - before_x, width), _clamp(gx + after_x, width)
        from_y, to_y = _clamp(gy - before_y, height), _clamp(gy + after_y, height)
        for column in self.grid[from_x:to_x]:
            for cell in column[from_y:to_y]:
                yield cell[0]

    def _draw_collision_box(self, target: Any, tile: Tile) -> None:
        x, y = tile.position
        box = FloatRect(x, y, self.grid_size_f, self.grid_size_f)
        target.draw_rect(box, _COLLISION_FILL, _COLLISION_OUTLINE, 1.0)

    def update(self) -> None:
        """The map has no per-frame logic of its own."""

    def render(self, target: Any, grid_position: tuple[int, int]) -> None:
        """Draw tiles around ``grid_position``; doodads are kept for ``render_deferred``."""
        for stack in self._visible_cells(grid_position, 7, 8, 5, 5):
            for tile in stack:
                if tile.tile_type == TileType.DOODAD:
                    self._deferred.append(tile)
                else:
                    tile.render(target)
                if tile.collision:
                    self._draw_collision_box(target, tile)

    def render_editor(self, target: Any, grid_position: tuple[int, int]) -> None:
        """Draw a wider area of tiles, doodads included, for the editor."""
        for stack in self._visible_cells(grid_position, 15, 20, 15, 20):
            for tile in stack:
                tile.render(target)
                if tile.collision:
                    self._draw_collision_box(target, tile)

    def add_tile(
        self, x: int, y: int, z: int, texture_rect: IntRect, collision: bool, tile_type: int
    ) -> None:
        """Stack a new tile on a cell; positions outside the map are ignored."""
        if self._in_bounds(x, y, z):
            self.grid[x][y][z].append(
                Tile(x, y, self.grid_size_f, self.tile_sheet, texture_rect, collision, tile_type)
            )
            logger.debug("added tile at %d %d %d", x, y, z)

    def remove_tile(self, x: int, y: int, z: int) -> None:
        """Remove the topmost tile of a cell, if there is one."""
        if self._in_bounds(x, y, z) and self.grid[x][y][z]:
            self.grid[x][y][z].pop()
            logger.debug("removed tile at %d %d %d", x, y, z)

    def save_to_file(self, file_name: str) -> None:
        """Write the map header and every tile; raises OSError if the file can't be opened."""
        width, height = self.max_size_world_grid
        with open(file_name, "w", encoding="utf-8") as out:
            out.write(
                f"{width} {height}\n{self.grid_size_i}\n{self.layers}\n{self.texture_file}\n"
            )
            for x, column in enumerate(self.grid):
                for y, cell in enumerate(column):
                    for z, stack in enumerate(cell):
                        for tile in stack:
                            out.write(f"{x} {y} {z} {tile.as_string()} ")

    def load_from_file(self, file_name: str) -> None:
        """Replace the map with one read from a file.

        Raises OSError if the file can't be read and ValueError if its header
        is malformed or a tile lies outside the map. Reading tiles stops at
        the first incomplete or malformed record.
        """
        with open(file_name, encoding="utf-8") as in_file:
            tokens = iter(in_file.read().split())

        header = list(islice(tokens, 5))
        try:
            width, height, grid_size, layers = (int(token) for token in header[:4])
            texture_file = header[4]
        except (ValueError, IndexError) as exc:
            raise ValueError(f"malformed tile map header in {file_name}") from exc

        self.grid_size_f = float(grid_size)
        self.grid_size_i = grid_size
        self.max_size_world_grid = (width, height)
        self.layers = layers
        self.texture_file = texture_file
        self._deferred.clear()
        self._build_grid()
        self.tile_sheet = _load_texture(texture_file)

        for x, y, z, tr_x, tr_y, collision, tile_type in _tile_records(tokens):
            if not self._in_bounds(x, y, z):
                raise ValueError(f"tile at {x} {y} {z} lies outside the map")
            rect = IntRect(tr_x, tr_y, self.grid_size_i, self.grid_size_i)
            self.grid[x][y][z].append(
                Tile(x, y, self.grid_size_f, self.tile_sheet, rect, collision, tile_type)
            )

    def update_collision(self, entity: Entity, dt: float) -> None:
        """Keep the entity inside the world and push it out of colliding tiles."""
        world_w, world_h = self.max_size_world

        if entity.position[0] < 0.0:
            entity.set_position(0.0, entity.position[1])
            entity.stop_velocity_x()
        elif entity.position[0] + entity.global_bounds().width > world_w:
            entity.set_position(world_w - entity.global_bounds().width, entity.position[1])
            entity.stop_velocity_x()
        if entity.position[1] < 0.0:
            entity.set_position(entity.position[0], 0.0)
            entity.stop_velocity_y()
        elif entity.position[1] + entity.global_bounds().height > world_h:
            entity.set_position(entity.position[0], world_h - entity.global_bounds().height)
            entity.stop_velocity_y()

        cells = self._visible_cells(entity.grid_position(self.grid_size_i), 1, 3, 1, 3)
        for stack in cells:
            for tile in stack:
                player = entity.global_bounds()
                wall = tile.global_bounds()
                next_bounds = entity.next_position_bounds(dt)

                if not (tile.collision and tile.intersects(next_bounds)):
                    continue

                player_right = player.left + player.width
                player_bottom = player.top + player.height
                wall_right = wall.left + wall.width
                wall_bottom = wall.top + wall.height
                overlaps_x = player.left < wall_right and player_right > wall.left
                overlaps_y = player.top < wall_bottom and player_bottom > wall.top

                if player.top < wall.top and player_bottom < wall_bottom and overlaps_x:
                    entity.stop_velocity_y()
                    entity.set_position(player.left, wall.top - player.height)
                elif player.top > wall.top and player_bottom > wall_bottom and overlaps_x:
                    entity.stop_velocity_y()
                    entity.set_position(player.left, wall_bottom)

                if player.left < wall.left and player_right < wall_right and overlaps_y:
                    entity.stop_velocity_x()
                    entity.set_position(wall.left - player.width, player.top)
                elif player.left > wall.left and player_right > wall_right and overlaps_y:
                    entity.stop_velocity_x()
                    entity.set_position(wall_right, player.top)

    def render_deferred(self, target: Any) -> None:
        """Draw the doodads held back by ``render``, last held first."""
        while self._deferred:
            self._deferred.pop().render(target)

    def layer_size(self, x: int, y: int, layer: int) -> int:
        """How many tiles are stacked on a cell layer, or -1 outside the map."""
        if 0 <= x < len(self.grid) and 0 <= y < len(self.grid[x]):
            cell = self.grid[x][y]
            if 0 <= layer < len(cell):
                return len(cell[layer])
        return -1