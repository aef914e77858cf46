"""A mouse-aimed gun mounted on an obstacle that fires projectiles."""

from __future__ import annotations

import math

import pygame
from pygame.math import Vector2

from .obstacle import Obstacle

_BARREL_LENGTH = 20.0
_BARREL_WIDTH = 10.0
_MUZZLE_OFFSET = 20.0
_FIRE_PARTICLES = 8
_FIRE_PARTICLE_SPEED = 5


class Gun:
    """Fires projectiles in the aimed direction, with a reload delay and knockback."""

    def __init__(self, owner, bullet_speed, fire_rate):
        self.owner = owner
        self.bullet_speed = bullet_speed
        self.fire_rate = fire_rate
        self.current_time = 0.0
        self.can_fire = True
        self.direction = Vector2(0.0, 0.0)
        self.projectile = Obstacle((0.0, 0.0), pygame.Color(255, 255, 255), 2, 0.0, 4, 1, 1)
        self.barrel_position = Vector2(owner.position) + self.direction * owner.collider.radius

    def reload(self, delta_time) -> None:
        if not self.can_fire:
            self.current_time += delta_time
            if self.current_time > self.fire_rate:
                self.current_time -= self.fire_rate
                self.can_fire = True

    def fire(self, particle_system, pool, trigger_pressed):
        """Shoot if loaded and the trigger is held; return the projectile or None."""
        if not (self.can_fire and trigger_pressed):
            return None
        shot = self.projectile.clone(self.barrel_position + self.direction * _MUZZLE_OFFSET)
        shot.velocity = self.direction * self.bullet_speed
        pool.player_obstacles.append(shot)
        particle_system.explode(
            self.projectile.create_particle(),
            self.owner.position,
            _FIRE_PARTICLES,
            _FIRE_PARTICLE_SPEED,
        )
        self.knockback()
        self.can_fire = False
        return shot

    def aim(self, target) -> None:
        """Point at ``target``; a target on the owner keeps the current direction."""
        offset = Vector2(target) - self.owner.position
        if offset.length() > 0:
            self.direction = offset.normalize()

    def knockback(self) -> None:
        self.owner.rigidbody.accelerate(-self.direction)

    def update(self, mouse_pos, delta_time) -> None:
        self.reload(delta_time)
        self.aim(mouse_pos)

    def draw(self, surface) -> None:
        angle = math.degrees(math.atan2(self.direction.y, self.direction.x))
        self.barrel_position = Vector2(self.owner.position)
        axis = Vector2(1, 0).rotate(angle)
        half = Vector2(-axis.y, axis.x) * (_BARREL_WIDTH / 2)
        tip = self.barrel_position + axis * _BARREL_LENGTH
        points = [
            self.barrel_position - half,
            tip - half,
            tip + half,
            self.barrel_position + half,
        ]
        thickness = int(self.owner.outline_thickness)
        if thickness > 0:
            pygame.draw.polygon(surface, self.owner.color, points, thickness)