"""The player's ship: steerable, screen-bound, armed and with a health bar."""

from __future__ import annotations

import pygame
from pygame.math import Vector2

from .gun import Gun
from .obstacle import Obstacle
from .pool import SCREEN_HEIGHT, SCREEN_WIDTH
from .widgets import Bar

_THRUST = 0.2
_HEALTHBAR_OFFSET = Vector2(0.0, 24.0)


class Player(Obstacle):
    """An obstacle controlled by the keyboard and mouse."""

    def __init__(self):
        super().__init__((0.0, 0.0), pygame.Color(255, 255, 255), 10, 0.01, 100, 40, 2)
        self.gun = Gun(self, 10, 0.2)
        self.healthbar = Bar(
            self.position + Vector2(0.0, 14.0), pygame.Color(255, 0, 0), 30.0, 6.0
        )

    def steer(self, left, right, up, down) -> None:
        """Apply thrust for each held direction."""
        if left:
            self.rigidbody.accelerate((-_THRUST, 0.0))
        if right:
            self.rigidbody.accelerate((_THRUST, 0.0))
        if up:
            self.rigidbody.accelerate((0.0, -_THRUST))
        if down:
            self.rigidbody.accelerate((0.0, _THRUST))

    def move(self) -> None:
        """Bounce off the screen edges, then move."""
        r = self.radius
        position = self.position
        velocity = self.rigidbody.velocity
        if position.x < r:
            position.x = r
            velocity.x = -velocity.x
        if position.x > SCREEN_WIDTH - r:
            position.x = SCREEN_WIDTH - r
            velocity.x = -velocity.x
        if position.y < r:
            position.y = r
            velocity.y = -velocity.y
        if position.y > SCREEN_HEIGHT - r:
            position.y = SCREEN_HEIGHT - r
            velocity.y = -velocity.y
        super().move()

    def update_gun(self, particle_system, pool, mouse_pos, mouse_pressed, delta_time) -> None:
        self.gun.fire(particle_system, pool, mouse_pressed)
        self.gun.update(mouse_pos, delta_time)

    def draw(self, surface) -> None:
        super().draw(surface)
        self.gun.draw(surface)
        self.healthbar.update_length(self.health, self.max_health)
        self.healthbar.position = self.position + _HEALTHBAR_OFFSET
        self.healthbar.draw(surface)