"""The playable game screens."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from tiphereth.character import Character2, Dwarf
from tiphereth.geometry import View
from tiphereth.pause_menu import PauseMenu
from tiphereth.state import State, StateData
from tiphereth.tile_map import TileMap

logger = logging.getLogger(__name__)

_MAP_WIDTH = 20
_MAP_HEIGHT = 13


class GameMode1State(State):
    """The first game mode: a dwarf steered with the arrow binds."""

    def __init__(self, state_data: StateData) -> None:
        super().__init__(state_data)
        self.load_key_binds(self._config_path("game_mode_1_keys"))
        texture = self._load_texture("dwarf_top", self._asset_path("mini_index.png"))
        self.dwarf = Dwarf(0.0, 0.0, texture)

    def update(self, dt: float) -> None:
        self.update_mouse_position()
        self.update_input(dt)
        self.dwarf.update(dt)

    def render(self, target: Any = None) -> None:
        """This mode draws nothing yet."""

    def update_input(self, dt: float) -> None:
        """Move in one direction at a time; the close key ends the state."""
        if self._key_pressed("Left"):
            self.dwarf.move(dt, -1.0, 0.0)
        elif self._key_pressed("Right"):
            self.dwarf.move(dt, 1.0, 0.0)
        elif self._key_pressed("Down"):
            self.dwarf.move(dt, 0.0, 1.0)
        elif self._key_pressed("Up"):
            self.dwarf.move(dt, 0.0, -1.0)

        if self._key_pressed("Close"):
            self.end_state()


class GameMode2State(State):
    """The second game mode: an animated character walking on the tile map.

    ``exit_state_factory`` builds the state pushed when QUIT is chosen in the
    pause menu; without it the state simply ends.
    """

    def __init__(
        self,
        state_data: StateData,
        exit_state_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        super().__init__(state_data)
        self.exit_state_factory = exit_state_factory

        width, height = state_data.gfx_settings.resolution
        self.view = View(
            center=(float(width) / 2.0, float(height) / 2.0),
            size=(float(width), float(height)),
        )
        self.view.zoom(0.235)

        self.load_key_binds(self._config_path("game_mode_1_keys"))
        self.font = self._load_font()
        self._load_texture("mini_index", self._asset_path("toutes_les_mini_index.png"))

        self.pause_menu = PauseMenu(self.window.size, self.font)
        self.pause_menu.add_button("EXIT_STATE", 800.0, "QUIT")

        self.character = Character2(100.0, 100.0, self.textures["mini_index"])

        self.tile_map = TileMap(
            state_data.grid_size, _MAP_WIDTH, _MAP_HEIGHT, self._asset_path("Map01.png")
        )
        map_file = str(state_data.map_file)
        try:
            self.tile_map.load_from_file(map_file)
        except OSError:
            logger.error("tile map could not load from file: %s", map_file)

    def update(self, dt: float) -> None:
        self.update_mouse_position(self.view)
        self.update_key_time(dt)
        self.update_input(dt)
        if not self.paused:
            self.update_view(dt)
            self.update_player_input(dt)
            self.update_tile_map(dt)
            self.character.update(dt)
        else:
            self.pause_menu.update(self.mouse_pos_window)
            self.update_pause_menu_buttons()

    def render(self, target: Any = None) -> None:
        target = self.window if target is None else target
        self._apply_view(target, self.view)
        grid_position = self.character.grid_position(int(self.state_data.grid_size))
        self.tile_map.render(target, grid_position)
        self.character.render(target)
        self.tile_map.render_deferred(target)
        self._apply_view(target)
        if self.paused:
            self.pause_menu.render(target)

    def update_input(self, dt: float) -> None:
        """Toggle the pause menu on the close key."""
        if self._key_pressed("Close") and self.consume_key_time():
            if self.paused:
                self.unpause_state()
            else:
                self.pause_state()

    def update_player_input(self, dt: float) -> None:
        """Accelerate the character for every direction held."""
        if self._key_pressed("Left"):
            self.character.move(dt, -1.0, 0.0)
        if self._key_pressed("Right"):
            self.character.move(dt, 1.0, 0.0)
        if self._key_pressed("Down"):
            self.character.move(dt, 0.0, 1.0)
        if self._key_pressed("Up"):
            self.character.move(dt, 0.0, -1.0)

    def update_pause_menu_buttons(self) -> None:
        if self.pause_menu.is_button_pressed("EXIT_STATE") and self.consume_key_time():
            if self.exit_state_factory is not None:
                self.states.append(self.exit_state_factory())
            else:
                self.end_state()

    def update_view(self, dt: float) -> None:
        """Centre the camera on the character."""
        self.view.center = self.character.position

    def update_tile_map(self, dt: float) -> None:
        self.tile_map.update()
        self.tile_map.update_collision(self.character, dt)