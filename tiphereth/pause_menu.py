"""The overlay shown while a state is paused."""

from __future__ import annotations

from typing import Any

from tiphereth.geometry import FloatRect, Vector
from tiphereth.gui import Button

_BACKGROUND_COLOR = (20, 20, 20, 100)
_CONTAINER_COLOR = (20, 20, 20, 200)
_TEXT_COLOR = (255, 255, 255, 200)
_NO_OUTLINE = (0, 0, 0, 0)
_TITLE = "PAUSED"
_TITLE_SIZE = 60
_BUTTON_WIDTH = 250.0
_BUTTON_HEIGHT = 50.0


def _text_width(font: Any, text: str) -> float:
    measure = getattr(font, "size", None)
    if callable(measure):
        return float(measure(text)[0])
    return 0.0


class PauseMenu:
    """A dimmed screen with a centred column of named buttons."""

    def __init__(self, window_size: tuple[int, int], font: Any) -> None:
        width, height = (float(value) for value in window_size)
        self.font = font
        self.background = FloatRect(0.0, 0.0, width, height)
        container_w = width / 4.0
        container_h = height - 60.0
        self.container = FloatRect(width / 2.0 - container_w / 2.0, 30.0, container_w, container_h)
        self.menu_text = _TITLE
        self.menu_text_position: Vector = (
            self.container.left + container_w / 2.0 - _text_width(font, _TITLE) / 2.0,
            self.container.top + 40.0,
        )
        self.buttons: dict[str, Button] = {}

    def update(self, mouse_pos_window: tuple[int, int]) -> None:
        for button in self.buttons.values():
            button.update(mouse_pos_window)

    def render(self, target: Any) -> None:
        target.draw_rect(self.background, _BACKGROUND_COLOR, _NO_OUTLINE, 0.0)
        target.draw_rect(self.container, _CONTAINER_COLOR, _NO_OUTLINE, 0.0)
        for button in self.buttons.values():
            button.render(target)
        target.draw_text(
            self.menu_text, self.menu_text_position, self.font, _TITLE_SIZE, _TEXT_COLOR
        )

    def add_button(self, key: str, y: float, text: str) -> None:
        """Add a button centred horizontally in the menu at height ``y``."""
        x = self.container.left + self.container.width / 2.0 - _BUTTON_WIDTH / 2.0
        self.buttons[key] = Button(x, y, _BUTTON_WIDTH, _BUTTON_HEIGHT, self.font, text, 30)

    def is_button_pressed(self, key: str) -> bool:
        """Whether the named button is pressed; raises KeyError for unknown names."""
        return self.buttons[key].is_pressed()