"""Buttons, drop-down lists and the tile texture selector.

Widgets draw through a render target offering ``draw_rect``, ``draw_sprite``
and ``draw_text(text, position, font, size, color)``.
"""

from __future__ import annotations

from dataclasses import replace
from enum import IntEnum
from typing import Any, Optional, Sequence

import pygame

from tiphereth.geometry import FloatRect, IntRect, Sprite, Vector

Color = tuple[int, int, int, int]

IDLE_COLOR: Color = (70, 70, 70, 200)
HOVER_COLOR: Color = (150, 150, 150, 200)
ACTIVE_COLOR: Color = (20, 20, 20, 200)

_TEXT_COLOR: Color = (255, 255, 255, 255)
_NO_OUTLINE: Color = (0, 0, 0, 0)
_TRANSPARENT: Color = (0, 0, 0, 0)
_PANEL_FILL: Color = (50, 50, 50, 100)
_PANEL_OUTLINE: Color = (255, 255, 255, 200)
_SELECTOR_OUTLINE: Color = (0, 0, 255, 255)


def _left_mouse_pressed() -> bool:
    try:
        return bool(pygame.mouse.get_pressed()[0])
    except pygame.error:
        return False


def _text_size(font: Any, text: str) -> tuple[float, float]:
    measure = getattr(font, "size", None)
    if callable(measure):
        width, height = measure(text)
        return float(width), float(height)
    return 0.0, 0.0


def _texture_size(texture: Any) -> Optional[tuple[int, int]]:
    get_size = getattr(texture, "get_size", None)
    if callable(get_size):
        width, height = get_size()
        return int(width), int(height)
    return None


class ButtonState(IntEnum):
    IDLE = 0
    HOVER = 1
    ACTIVE = 2


class Button:
    """A clickable rectangle with a centred label."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        font: Any,
        text: str,
        text_size: float,
        idle_color: Color = IDLE_COLOR,
        hover_color: Color = HOVER_COLOR,
        active_color: Color = ACTIVE_COLOR,
        button_id: int = 0,
    ) -> None:
        self.bounds = FloatRect(x, y, width, height)
        self.font = font
        self.text = text
        self.text_size = text_size
        self.idle_color = idle_color
        self.hover_color = hover_color
        self.active_color = active_color
        self.id = button_id
        self.state = ButtonState.IDLE
        self.fill_color = idle_color
        text_w, text_h = _text_size(font, text)
        self.text_position: Vector = (
            x + width / 2.0 - text_w / 2.0,
            y + height / 2.0 - text_h / 2.0,
        )

    def render(self, target: Any) -> None:
        target.draw_rect(self.bounds, self.fill_color, _NO_OUTLINE, 0.0)
        target.draw_text(self.text, self.text_position, self.font, self.text_size, _TEXT_COLOR)

    def update(self, mouse_pos_window: tuple[int, int]) -> None:
        """Set hover or active state from the mouse position and left button."""
        mx, my = mouse_pos_window
        self.state = ButtonState.IDLE
        if self.bounds.contains(float(mx), float(my)):
            self.state = ButtonState.HOVER
            if _left_mouse_pressed():
                self.state = ButtonState.ACTIVE
        self.fill_color = {
            ButtonState.IDLE: self.idle_color,
            ButtonState.HOVER: self.hover_color,
            ButtonState.ACTIVE: self.active_color,
        }[self.state]

    def is_pressed(self) -> bool:
        return self.state == ButtonState.ACTIVE


class DropDownList:
    """A button that opens a column of options below it."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        font: Any,
        items: Sequence[str],
        default_index: int = 0,
    ) -> None:
        self.font = font
        self.show_list = False
        self.key_time = 0.0
        self.key_time_max = 10.0
        self.active_element = Button(x, y, width, height, font, items[default_index], 15)
        self.options = [
            Button(x, y + (index + 1) * height, width, height, font, label, 15, button_id=index)
            for index, label in enumerate(items)
        ]

    @property
    def active_element_id(self) -> int:
        return self.active_element.id

    def render(self, target: Any) -> None:
        self.active_element.render(target)
        if self.show_list:
            for option in self.options:
                option.render(target)

    def update(self, mouse_pos_window: tuple[int, int], dt: float) -> None:
        """Toggle the list on click and take over the label of a chosen option."""
        self.update_key_time(dt)
        self.active_element.update(mouse_pos_window)
        if self.active_element.is_pressed() and self.consume_key_time():
            self.show_list = not self.show_list

        if self.show_list:
            for option in self.options:
                option.update(mouse_pos_window)
                if option.is_pressed() and self.consume_key_time():
                    self.show_list = False
                    self.active_element.text = option.text
                    self.active_element.id = option.id

    def consume_key_time(self) -> bool:
        """True, and restart the cooldown, if enough time passed since the last click."""
        if self.key_time >= self.key_time_max:
            self.key_time = 0.0
            return True
        return False

    def update_key_time(self, dt: float) -> None:
        if self.key_time < self.key_time_max:
            self.key_time += 60.0 * dt


class TextureSelector:
    """A panel showing the tile sheet where a grid cell can be picked."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        grid_size: float,
        texture_sheet: Any,
        font: Any,
        text: str,
    ) -> None:
        self.grid_size = grid_size
        self.active = False
        self.hidden = False
        self.key_time = 0.0
        self.key_time_max = 10.0
        self.bounds = FloatRect(x, y, width, height)

        size = _texture_size(texture_sheet)
        self.sheet = Sprite(
            position=(x, y),
            texture=texture_sheet,
            texture_rect=IntRect(0, 0, *size) if size is not None else None,
        )
        if self.sheet.global_bounds().width > self.bounds.width:
            self.sheet.texture_rect = IntRect(
                0, 0, int(self.bounds.width), int(self.sheet.global_bounds().height)
            )
        if self.sheet.global_bounds().height > self.bounds.height:
            self.sheet.texture_rect = IntRect(
                0, 0, int(self.bounds.height), int(self.sheet.global_bounds().width)
            )

        self.selector_position: Vector = (x, y)
        self.mouse_pos_grid = (0, 0)
        self.texture_rect = IntRect(0, 0, int(grid_size), int(grid_size))
        self.hide_button = Button(20.0, 20.0, 50.0, 50.0, font, text, 25)

    def update(self, mouse_pos_window: tuple[int, int], dt: float) -> None:
        """Handle the hide button and track the cell under the mouse."""
        self.update_key_time(dt)
        self.hide_button.update(mouse_pos_window)
        if self.hide_button.is_pressed() and self.consume_key_time():
            self.hidden = not self.hidden

        if self.hidden:
            return

        mx, my = mouse_pos_window
        self.active = self.bounds.contains(float(mx), float(my))
        if not self.active:
            return

        left, top = self.bounds.left, self.bounds.top
        cell = int(self.grid_size)
        grid_x = (int(mx) - int(left)) // cell
        grid_y = (int(my) - int(top)) // cell
        self.mouse_pos_grid = (grid_x, grid_y)
        self.selector_position = (
            left + grid_x * self.grid_size,
            top + grid_y * self.grid_size,
        )
        self.texture_rect = replace(
            self.texture_rect,
            left=int(self.selector_position[0] - left),
            top=int(self.selector_position[1] - top),
        )

    def render(self, target: Any) -> None:
        if not self.hidden:
            target.draw_rect(self.bounds, _PANEL_FILL, _PANEL_OUTLINE, 1.0)
            target.draw_sprite(self.sheet)
            if self.active:
                sx, sy = self.selector_position
                selector = FloatRect(sx, sy, self.grid_size, self.grid_size)
                target.draw_rect(selector, _TRANSPARENT, _SELECTOR_OUTLINE, 1.0)
        self.hide_button.render(target)

    def update_key_time(self, dt: float) -> None:
        if self.key_time < self.key_time_max:
            self.key_time += 50.0 * dt

    def consume_key_time(self) -> bool:
        """True, and restart the cooldown, if enough time passed since the last click."""
        if self.key_time >= self.key_time_max:
            self.key_time = 0.0
            return True
        return False