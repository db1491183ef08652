"""Base class for everything that moves and collides in the world."""

from __future__ import annotations

from typing import Any, Optional

from tiphereth.animation_component import AnimationComponent
from tiphereth.geometry import FloatRect, IntRect, Sprite, Vector
from tiphereth.hitbox_component import HitboxComponent
from tiphereth.movement_component import MovementComponent


def _trunc_div(value: float, size: int) -> int:
    return int(int(value) / size)


class Entity:
    """A sprite with optional movement, animation and hitbox components."""

    def __init__(self) -> None:
        self.sprite = Sprite()
        self.movement_component: Optional[MovementComponent] = None
        self.animation_component: Optional[AnimationComponent] = None
        self.hitbox_component: Optional[HitboxComponent] = None

    def update(self, dt: float) -> None:
        if self.movement_component is not None:
            self.movement_component.update(dt)

    def render(self, target: Any) -> None:
        """Base entities have nothing of their own to draw."""

    def move(self, dt: float, dir_x: float, dir_y: float) -> None:
        if self.movement_component is not None:
            self.movement_component.move(dir_x, dir_y, dt)

    def stop_velocity(self) -> None:
        if self.movement_component is not None:
            self.movement_component.stop_velocity()

    def stop_velocity_x(self) -> None:
        if self.movement_component is not None:
            self.movement_component.stop_velocity_x()

    def stop_velocity_y(self) -> None:
        if self.movement_component is not None:
            self.movement_component.stop_velocity_y()

    def set_texture(self, texture: Any) -> None:
        """Attach a texture; an unset texture area takes the texture's full size."""
        self.sprite.texture = texture
        get_size = getattr(texture, "get_size", None)
        if self.sprite.texture_rect is None and callable(get_size):
            width, height = get_size()
            self.sprite.texture_rect = IntRect(0, 0, int(width), int(height))

    def create_movement_component(
        self, max_velocity: float, acceleration: float, deceleration: float
    ) -> None:
        self.movement_component = MovementComponent(
            self.sprite, max_velocity, acceleration, deceleration
        )

    def create_animation_component(self, texture_sheet: Any) -> None:
        self.animation_component = AnimationComponent(self.sprite, texture_sheet)

    def create_hitbox_component(
        self,
        sprite: Sprite,
        offset_x: float,
        offset_y: float,
        width: float,
        height: float,
    ) -> None:
        self.hitbox_component = HitboxComponent(sprite, offset_x, offset_y, width, height)

    @property
    def position(self) -> Vector:
        if self.hitbox_component is not None:
            return self.hitbox_component.position
        return self.sprite.position

    def global_bounds(self) -> FloatRect:
        if self.hitbox_component is not None:
            return self.hitbox_component.global_bounds()
        return self.sprite.global_bounds()

    def grid_position(self, grid_size: int) -> tuple[int, int]:
        """The grid cell holding the entity, truncating toward zero."""
        x, y = self.position
        return (_trunc_div(x, grid_size), _trunc_div(y, grid_size))

    def next_position_bounds(self, dt: float) -> FloatRect:
        """Where the hitbox will be after ``dt``; (-1, -1, -1, -1) without components."""
        if self.hitbox_component is not None and self.movement_component is not None:
            vx, vy = self.movement_component.velocity
            return self.hitbox_component.next_position((vx * dt, vy * dt))
        return FloatRect(-1.0, -1.0, -1.0, -1.0)

    def set_position(self, x: float, y: float) -> None:
        if self.hitbox_component is not None:
            self.hitbox_component.set_position(x, y)
        else:
            self.sprite.position = (x, y)