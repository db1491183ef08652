"""The tile map editor screen."""

from __future__ import annotations

import logging
from typing import Any

from tiphereth.geometry import FloatRect, IntRect, Sprite, View
from tiphereth.gui import Button, TextureSelector
from tiphereth.pause_menu import PauseMenu
from tiphereth.state import MOUSE_LEFT, MOUSE_RIGHT, State, StateData
from tiphereth.tile import TileType
from tiphereth.tile_map import TileMap

logger = logging.getLogger(__name__)

_SIDE_BAR_FILL = (50, 50, 50, 100)
_SIDE_BAR_OUTLINE = (200, 200, 200, 150)
_SELECTOR_OUTLINE = (0, 255, 0, 255)
_TRANSPARENT = (0, 0, 0, 0)
_CURSOR_TEXT_COLOR = (255, 255, 255, 255)
_CURSOR_TEXT_SIZE = 12
_MAP_WIDTH = 20
_MAP_HEIGHT = 13


class EditorState(State):
    """Places and removes tiles with the mouse and saves the map."""

    def __init__(self, state_data: StateData) -> None:
        super().__init__(state_data)
        grid = int(state_data.grid_size)
        self.texture_rect = IntRect(0, 0, grid, grid)
        self.collision = False
        self.tile_type = int(TileType.DEFAULT)
        self.cam_speed = 300.0
        self.layer = 0

        width, height = state_data.gfx_settings.resolution
        self.view = View(
            center=(float(width) / 2.0, float(height) / 2.0),
            size=(float(width), float(height)),
        )
        self.view.zoom(0.75)

        self.font = self._load_font()
        self.cursor_text = ""
        self.cursor_text_position = self.mouse_pos_view
        self.load_key_binds(self._config_path("editor_keys"))

        self.pause_menu = PauseMenu(self.window.size, self.font)
        self.pause_menu.add_button("EXIT_STATE", 800.0, "QUIT")
        self.pause_menu.add_button("SAVE", 700.0, "SAVE")
        self.pause_menu.add_button("LOAD", 500.0, "LOAD")

        self.buttons: dict[str, Button] = {}
        self.tile_map = TileMap(
            state_data.grid_size, _MAP_WIDTH, _MAP_HEIGHT, self._asset_path("Map01.png")
        )

        self.side_bar = FloatRect(0.0, 0.0, 96.0, float(height))
        self.selector_position = (0.0, 0.0)
        self.texture_selector = TextureSelector(
            1100.0, 20.0, 512.0, 512.0, state_data.grid_size,
            self.tile_map.tile_sheet, self.font, "TS",
        )

    def update(self, dt: float) -> None:
        self.update_mouse_position(self.view)
        self.update_key_time(dt)
        self.update_input(dt)
        if not self.paused:
            self.update_buttons()
            self.update_gui(dt)
            self.update_editor_input(dt)
        else:
            self.pause_menu.update(self.mouse_pos_window)
            self.update_pause_menu_buttons()
        self.update_buttons()

    def render(self, target: Any = None) -> None:
        target = self.window if target is None else target
        self._apply_view(target, self.view)
        self.tile_map.render_editor(target, self.mouse_pos_grid)
        self._apply_view(target)
        self.render_buttons(target)
        self.render_gui(target)
        if self.paused:
            self._apply_view(target)
            self.pause_menu.render(target)

    def update_input(self, dt: float) -> None:
        """Toggle the pause menu on the close key."""
        if self._key_pressed("Close") and self.consume_key_time():
            if self.paused:
                self.unpause_state()
            else:
                self.pause_state()

    def update_gui(self, dt: float) -> None:
        """Move the tile cursor and refresh the information text."""
        self.texture_selector.update(self.mouse_pos_window, dt)
        grid_x, grid_y = self.mouse_pos_grid
        if not self.texture_selector.active:
            size = self.state_data.grid_size
            self.selector_position = (grid_x * size, grid_y * size)

        view_x, view_y = self.mouse_pos_view
        self.cursor_text_position = (view_x + 100.0, view_y - 50.0)
        tiles = self.tile_map.layer_size(grid_x, grid_y, self.layer)
        self.cursor_text = "\n".join(
            [
                f"{view_x:g} {view_y:g}",
                f"{grid_x} {grid_y}",
                f"{self.texture_rect.left} {self.texture_rect.top}",
                f"collision: {int(self.collision)}",
                f"type: {self.tile_type}",
                f"tiles: {tiles}",
            ]
        )

    def update_buttons(self) -> None:
        for button in self.buttons.values():
            button.update(self.mouse_pos_window)

    def update_editor_input(self, dt: float) -> None:
        """Move the camera, place or remove tiles, and change the brush."""
        step = self.cam_speed * dt
        if self._key_pressed("MOVE_CAM_UP"):
            self.view.move(0.0, -step)
        if self._key_pressed("MOVE_CAM_DOWN"):
            self.view.move(0.0, step)
        if self._key_pressed("MOVE_CAM_LEFT"):
            self.view.move(-step, 0.0)
        if self._key_pressed("MOVE_CAM_RIGHT"):
            self.view.move(step, 0.0)

        mouse_x, mouse_y = self.mouse_pos_window
        over_side_bar = self.side_bar.contains(float(mouse_x), float(mouse_y))
        grid_x, grid_y = self.mouse_pos_grid

        if self.input.is_mouse_pressed(MOUSE_LEFT) and self.consume_key_time():
            if not over_side_bar:
                if not self.texture_selector.active:
                    self.tile_map.add_tile(
                        grid_x, grid_y, 0, self.texture_rect, self.collision, self.tile_type
                    )
                else:
                    self.texture_rect = self.texture_selector.texture_rect
        elif self.input.is_mouse_pressed(MOUSE_RIGHT) and self.consume_key_time():
            if not over_side_bar and not self.texture_selector.active:
                self.tile_map.remove_tile(grid_x, grid_y, 0)

        if self._key_pressed("COLLISION") and self.consume_key_time():
            self.collision = not self.collision
        elif self._key_pressed("TYPE_INC") and self.consume_key_time():
            self.tile_type += 1
        elif self._key_pressed("TYPE_DEC") and self.consume_key_time():
            if self.tile_type > 0:
                self.tile_type -= 1

    def render_buttons(self, target: Any) -> None:
        for button in self.buttons.values():
            button.render(target)

    def render_gui(self, target: Any) -> None:
        """Draw the tile cursor, the texture selector, the side bar and the text."""
        size = self.state_data.grid_size
        if not self.texture_selector.active:
            self._apply_view(target, self.view)
            rect = self.texture_rect
            scale = (
                size / rect.width if rect.width else 1.0,
                size / rect.height if rect.height else 1.0,
            )
            brush = Sprite(
                position=self.selector_position,
                scale=scale,
                texture=self.tile_map.tile_sheet,
                texture_rect=rect,
            )
            target.draw_sprite(brush)
            x, y = self.selector_position
            target.draw_rect(FloatRect(x, y, size, size), _TRANSPARENT, _SELECTOR_OUTLINE, 1.0)
        self._apply_view(target)
        self.texture_selector.render(target)
        target.draw_rect(self.side_bar, _SIDE_BAR_FILL, _SIDE_BAR_OUTLINE, 1.0)

        self._apply_view(target, self.view)
        target.draw_text(
            self.cursor_text,
            self.cursor_text_position,
            self.font,
            _CURSOR_TEXT_SIZE,
            _CURSOR_TEXT_COLOR,
        )

    def update_pause_menu_buttons(self) -> None:
        """Quit, save or load the map from the pause menu."""
        map_file = str(self.state_data.map_file)
        if self.pause_menu.is_button_pressed("EXIT_STATE") and self.consume_key_time():
            self.end_state()
        if self.pause_menu.is_button_pressed("SAVE") and self.consume_key_time():
            try:
                self.tile_map.save_to_file(map_file)
            except OSError:
                logger.error("tile map could not save to file: %s", map_file)
        if self.pause_menu.is_button_pressed("LOAD") and self.consume_key_time():
            try:
                self.tile_map.load_from_file(map_file)
            except OSError:
                logger.error("tile map could not load from file: %s", map_file)