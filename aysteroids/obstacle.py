"""Circular bodies that move, collide, take damage and die."""

from __future__ import annotations

import math

import pygame
from pygame.math import Vector2

from .particles import Particle
from .rigidbody import CircleCollider, Rigidbody

_OUTLINE_THICKNESS = 3
_HIT_PARTICLES = 4
_HIT_PARTICLE_SPEED = 5


def _draw_outline(surface, center, radius, color, thickness) -> None:
    if thickness <= 0:
        return
    outer = radius + thickness
    size = int(math.ceil(outer * 2)) + 2
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(layer, color, (size / 2, size / 2), outer, int(thickness))
    surface.blit(layer, (round(center[0] - size / 2), round(center[1] - size / 2)))


class Obstacle:
    """An outlined circle with health, damage, a collider and a rigid body."""

    def __init__(self, position, color, radius, friction, damage, health, mass):
        self._position = Vector2(position)
        self.color = pygame.Color(color)
        self.radius = float(radius)
        self.outline_thickness = _OUTLINE_THICKNESS
        self.collider = CircleCollider(self._position, int(radius))
        self.rigidbody = Rigidbody(self._position, (0.0, 0.0), friction, mass)
        self.damage = damage
        self.health = health
        self.max_health = health
        self.dead = False

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value) -> None:
        self._position.update(value)

    @property
    def velocity(self) -> Vector2:
        return self.rigidbody.velocity

    @velocity.setter
    def velocity(self, value) -> None:
        self.rigidbody.velocity = Vector2(value)

    def clone(self, position) -> "Obstacle":
        """Return a fresh, motionless obstacle of this kind at ``position``.

        Its health and maximum health are this obstacle's current health.
        """
        copy = Obstacle(
            position,
            self.color,
            self.radius,
            self.rigidbody.friction,
            self.damage,
            self.health,
            self.rigidbody.mass,
        )
        copy.outline_thickness = self.outline_thickness
        return copy

    def create_particle(self) -> Particle:
        """Return a particle template matching this obstacle's look."""
        return Particle(
            (0.0, 0.0),
            (0.0, 0.0),
            self.color,
            int(self.radius / 2),
            int(self.outline_thickness / 2),
            0.0,
        )

    def get_hit(self, particle_system, damage) -> None:
        """Burst particles at this obstacle and take ``damage``."""
        particle_system.explode(
            self.create_particle(), self.position, _HIT_PARTICLES, _HIT_PARTICLE_SPEED
        )
        self.decrease_health(damage)

    def decrease_health(self, damage) -> None:
        self.health -= damage
        self.dead = self.health <= 0

    def update(self) -> None:
        self.move()

    def move(self) -> None:
        self.rigidbody.move()

    def draw(self, surface) -> None:
        _draw_outline(surface, self.position, self.radius, self.color, self.outline_thickness)