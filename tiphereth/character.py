"""Playable characters."""

from __future__ import annotations

from typing import Any

import pygame

from tiphereth.entity import Entity
from tiphereth.movement_component import MovementState

_SCALE = 0.30
_FRAME_SIZE = 90


def _left_mouse_pressed() -> bool:
    try:
        return bool(pygame.mouse.get_pressed()[0])
    except pygame.error:
        return False


class Dwarf(Entity):
    """A character with no components; it neither moves nor draws."""

    def __init__(self, x: float, y: float, texture: Any) -> None:
        super().__init__()

    def update(self, dt: float) -> None:
        super().update(dt)

    def render(self, target: Any) -> None:
        """Dwarves have nothing to draw."""


class Character2(Entity):
    """An animated character that walks, faces its direction and attacks on click."""

    def __init__(self, x: float, y: float, texture_sheet: Any) -> None:
        super().__init__()
        self.attacking = False

        self.set_position(x, y)
        self.sprite.scale = (_SCALE, _SCALE)

        self.create_hitbox_component(self.sprite, 5.0, 5.0, 18.0, 20.0)
        self.create_movement_component(100.0, 5000.0, 2500.0)
        self.create_animation_component(texture_sheet)

        animations = self.animation_component
        animations.add_animation("IDLE", 10.0, 0, 0, 0, 0, _FRAME_SIZE, _FRAME_SIZE)
        animations.add_animation("WALK", 5.0, 0, 0, 0, 0, _FRAME_SIZE, _FRAME_SIZE)
        animations.add_animation("ATTACK", 7.5, 0, 0, 3, 0, _FRAME_SIZE, _FRAME_SIZE)

    def update(self, dt: float) -> None:
        self.movement_component.update(dt)
        self.update_attack()
        self.update_animation(dt)
        self.hitbox_component.update()

    def update_animation(self, dt: float) -> None:
        """Play the attack, then the animation matching the movement direction."""
        animations = self.animation_component
        movement = self.movement_component
        vx, vy = movement.velocity

        if self.attacking and animations.play("ATTACK", dt, priority=True):
            self.attacking = False

        if movement.state_is(MovementState.IDLE):
            animations.play("IDLE", dt)
        elif movement.state_is(MovementState.MOVING_LEFT):
            self.sprite.origin = (float(_FRAME_SIZE), 0.0)
            self.sprite.scale = (-_SCALE, _SCALE)
            animations.play("WALK", dt, vx, movement.max_velocity)
        elif movement.state_is(MovementState.MOVING_RIGHT):
            self.sprite.origin = (0.0, 0.0)
            self.sprite.scale = (_SCALE, _SCALE)
            animations.play("WALK", dt, vx, movement.max_velocity)
        elif movement.state_is(MovementState.MOVING_UP) or movement.state_is(
            MovementState.MOVING_DOWN
        ):
            animations.play("WALK", dt, vy, movement.max_velocity)

    def update_attack(self) -> None:
        if _left_mouse_pressed():
            self.attacking = True

    def render(self, target: Any) -> None:
        target.draw_sprite(self.sprite)
        self.hitbox_component.render(target)