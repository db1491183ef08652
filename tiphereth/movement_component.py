"""Velocity, acceleration and friction for a sprite."""

from __future__ import annotations

from enum import IntEnum

from tiphereth.geometry import Sprite, Vector


class MovementState(IntEnum):
    IDLE = 0
    MOVING = 1
    MOVING_LEFT = 2
    MOVING_RIGHT = 3
    MOVING_UP = 4
    MOVING_DOWN = 5


class MovementComponent:
    """Accelerates a sprite on input and slows it down every frame."""

    def __init__(
        self,
        sprite: Sprite,
        max_velocity: float,
        acceleration: float,
        deceleration: float,
    ) -> None:
        self.sprite = sprite
        self.max_velocity = max_velocity
        self.acceleration = acceleration
        self.deceleration = deceleration
        self.velocity_x = 0.0
        self.velocity_y = 0.0

    @property
    def velocity(self) -> Vector:
        return (self.velocity_x, self.velocity_y)

    def state_is(self, state: int) -> bool:
        """Whether the current velocity matches the given movement state."""
        vx, vy = self.velocity_x, self.velocity_y
        checks = {
            MovementState.IDLE: vx == 0.0 and vy == 0.0,
            MovementState.MOVING: vx != 0.0 or vy != 0.0,
            MovementState.MOVING_LEFT: vx < 0.0,
            MovementState.MOVING_RIGHT: vx > 0.0,
            MovementState.MOVING_DOWN: vy > 0.0,
            MovementState.MOVING_UP: vy < 0.0,
        }
        return checks.get(state, False)

    def stop_velocity(self) -> None:
        self.velocity_x = 0.0
        self.velocity_y = 0.0

    def stop_velocity_x(self) -> None:
        self.velocity_x = 0.0

    def stop_velocity_y(self) -> None:
        self.velocity_y = 0.0

    def _decelerate(self, velocity: float, dt: float) -> float:
        if velocity > 0.0:
            velocity = min(velocity, self.max_velocity)
            return max(velocity - self.deceleration * dt, 0.0)
        if velocity < 0.0:
            velocity = max(velocity, -self.max_velocity)
            return min(velocity + self.deceleration * dt, 0.0)
        return velocity

    def update(self, dt: float) -> None:
        """Clamp to the maximum speed, apply friction and move the sprite."""
        self.velocity_x = self._decelerate(self.velocity_x, dt)
        self.velocity_y = self._decelerate(self.velocity_y, dt)
        self.sprite.move(self.velocity_x * dt, self.velocity_y * dt)

    def move(self, dir_x: float, dir_y: float, dt: float) -> None:
        self.velocity_x += self.acceleration * dir_x * dt
        self.velocity_y += self.acceleration * dir_y * dt