"""Short-lived fading particles and the system that spawns and updates them."""

from __future__ import annotations

import math
import random

import pygame
from pygame.math import Vector2

from .rigidbody import Rigidbody

GREEN = pygame.Color(0, 255, 0)
_FADE_STEP = 6


def _draw_ring(surface, center, radius, color, thickness) -> None:
    if thickness <= 0:
        return
    outer = radius + thickness
    size = int(math.ceil(outer * 2)) + 2
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(layer, color, (size / 2, size / 2), outer, int(thickness))
    surface.blit(layer, (round(center[0] - size / 2), round(center[1] - size / 2)))


class Particle:
    """A circle outline that drifts with its velocity and fades away."""

    def __init__(
        self,
        position=(0.0, 0.0),
        velocity=(0.0, 0.0),
        color=GREEN,
        radius=2,
        outline_thickness=2,
        friction=0.0,
    ):
        self.position = Vector2(position)
        self.rigidbody = Rigidbody(self.position, velocity, friction, 1)
        self.color = pygame.Color(color)
        self.radius = float(radius)
        self.outline_thickness = outline_thickness

    def spawn(self, position, velocity) -> "Particle":
        """Return a new particle styled like this one at ``position``."""
        return Particle(
            position,
            velocity,
            self.color,
            self.radius,
            self.outline_thickness,
            self.rigidbody.friction,
        )

    def fade_out(self, fade_out_speed) -> bool:
        """Lower the alpha; return True once the particle is invisible."""
        self.color.a = max(0, self.color.a - fade_out_speed)
        return self.color.a <= 0

    def move(self) -> None:
        self.rigidbody.move()

    def draw(self, surface) -> None:
        _draw_ring(surface, self.position, self.radius, self.color, self.outline_thickness)


class ParticleSystem:
    """Holds live particles, bursts new ones and retires faded ones."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []

    def explode(self, particle, position, particle_amount, particle_speed) -> None:
        """Spawn ``particle_amount`` copies of ``particle`` with random velocities."""
        for _ in range(particle_amount):
            velocity = (
                self.rng.randrange(particle_speed) - 2,
                self.rng.randrange(particle_speed) - 2,
            )
            self.particles.append(particle.spawn(position, velocity))

    def update(self, surface, delta_time) -> None:
        """Move and draw every particle, then drop those that have faded out."""
        for particle in self.particles:
            particle.move()
            particle.draw(surface)
        self.particles = [p for p in self.particles if not p.fade_out(_FADE_STEP)]