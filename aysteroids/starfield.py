"""A scrolling background of stars drifting left to right."""

from __future__ import annotations

import random

import pygame
from pygame.math import Vector2

from .pool import SCREEN_HEIGHT, SCREEN_WIDTH


class Star:
    """A filled grey dot moving horizontally at a constant speed."""

    def __init__(self, y, velocity, radius, brightness):
        self.position = Vector2(0.0, y)
        self.velocity = velocity
        self.radius = radius
        level = int(brightness) % 256
        self.color = pygame.Color(level, level, level, 255)

    @property
    def x(self) -> float:
        return self.position.x

    def move(self) -> None:
        self.position.x += self.velocity

    def draw(self, surface) -> None:
        pygame.draw.circle(surface, self.color, self.position, self.radius)


class Starfield:
    """Creates a star every ``rate`` seconds and retires stars past the right edge."""

    def __init__(self, rate, rng=None):
        self.rate = rate
        self.rng = rng if rng is not None else random.Random()
        self.current_time = 0.0
        self.stars: list[Star] = []

    def update(self, surface, delta_time) -> None:
        self.current_time += delta_time
        if self.current_time > self.rate:
            self.create_star(5, 2, 150)
            self.current_time -= self.rate

        for star in self.stars:
            star.move()
            star.draw(surface)

        self.stars = [star for star in self.stars if star.x <= SCREEN_WIDTH]

    def create_star(self, velocity, radius, brightness) -> Star:
        """Add a star with attributes jittered around the given values."""
        rand = self.rng.randrange
        y = rand(SCREEN_HEIGHT) + 1
        speed = rand(int((velocity + 3) + 1 - (velocity - 3))) + (velocity - 3)
        radius *= 10
        size = (rand(int((radius + 10) + 1 - (radius - 10))) + (radius - 10)) / 10
        bright = rand(int((brightness + 100) + 1 - (brightness - 100))) + (brightness - 100)
        star = Star(float(y), float(speed), float(size), bright)
        self.stars.append(star)
        return star