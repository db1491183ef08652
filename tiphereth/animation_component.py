"""Sprite-sheet animations keyed by name."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

from tiphereth.geometry import IntRect, Sprite


class Animation:
    """One row of frames on a texture sheet, advanced on a timer."""

    def __init__(
        self,
        sprite: Sprite,
        texture_sheet: Any,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ) -> None:
        self.sprite = sprite
        self.texture_sheet = texture_sheet
        self.animation_timer = animation_timer
        self.timer = 0.0
        self.done = False
        self.width = width
        self.height = height
        self.start_rect = IntRect(start_frame_x * width, start_frame_y * height, width, height)
        self.current_rect = self.start_rect
        self.end_rect = IntRect(frames_x * width, frames_y * height, width, height)

        sprite.texture = texture_sheet
        sprite.texture_rect = self.start_rect

    def play(self, dt: float, mod_percent: Optional[float] = None) -> bool:
        """Advance the timer; return True when the last frame wrapped around.

        With ``mod_percent`` the speed is scaled by it, but never below half.
        """
        rate = 1.0 if mod_percent is None else max(mod_percent, 0.5)
        self.done = False
        self.timer += rate * 100.0 * dt
        if self.timer >= self.animation_timer:
            self.timer = 0.0
            if self.current_rect != self.end_rect:
                self.current_rect = replace(
                    self.current_rect, left=self.current_rect.left + self.width
                )
            else:
                self.current_rect = replace(self.current_rect, left=self.start_rect.left)
                self.done = True
            self.sprite.texture_rect = self.current_rect
        return self.done

    def reset(self) -> None:
        """Return to the first frame, ready to advance on the next play."""
        self.timer = self.animation_timer
        self.current_rect = self.start_rect


class AnimationComponent:
    """Switches between named animations, honouring one priority animation."""

    def __init__(self, sprite: Sprite, texture_sheet: Any) -> None:
        self.sprite = sprite
        self.texture_sheet = texture_sheet
        self.animations: dict[str, Animation] = {}
        self._last: Optional[Animation] = None
        self._priority: Optional[Animation] = None

    def add_animation(
        self,
        key: str,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ) -> None:
        self.animations[key] = Animation(
            self.sprite,
            self.texture_sheet,
            animation_timer,
            start_frame_x,
            start_frame_y,
            frames_x,
            frames_y,
            width,
            height,
        )

    def _switch_to(self, animation: Animation) -> None:
        if self._last is not animation:
            if self._last is not None:
                self._last.reset()
            self._last = animation

    def play(
        self,
        key: str,
        dt: float,
        modifier: Optional[float] = None,
        modifier_max: Optional[float] = None,
        priority: bool = False,
    ) -> bool:
        """Play the named animation and return whether it has just finished.

        While a priority animation runs, other animations are ignored until it
        completes a cycle. ``modifier / modifier_max`` scales the speed.
        """
        animation = self.animations[key]
        mod_percent = None if modifier is None else abs(modifier / modifier_max)

        if self._priority is not None:
            if self._priority is animation:
                self._switch_to(animation)
                if animation.play(dt, mod_percent):
                    self._priority = None
        else:
            if priority:
                self._priority = animation
            self._switch_to(animation)
            animation.play(dt, mod_percent)

        return animation.done

    def is_done(self, key: str) -> bool:
        return self.animations[key].done