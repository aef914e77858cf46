"""Spawns obstacles at random screen edges, aimed across the screen."""

from __future__ import annotations

import random

import pygame
from pygame.math import Vector2

from .obstacle import Obstacle
from .pool import SCREEN_HEIGHT, SCREEN_WIDTH

_SPAWN_SPEED = 4.0


def _obstacle_types() -> list[Obstacle]:
    origin = (0.0, 0.0)
    return [
        Obstacle(origin, pygame.Color(0, 255, 0), 10, 0.0, 1, 4, 1),
        Obstacle(origin, pygame.Color(0, 255, 255), 30, 0.0, 3, 6, 3),
        Obstacle(origin, pygame.Color(255, 255, 0), 40, 0.0, 4, 7, 4),
        Obstacle(origin, pygame.Color(255, 0, 255), 60, 0.0, 6, 9, 6),
        Obstacle(origin, pygame.Color(255, 0, 0), 70, 0.0, 7, 10, 7),
    ]


class ObstacleSpawner:
    """Every ``spawn_rate`` seconds, launches a random obstacle from a random edge."""

    def __init__(self, spawn_rate, rng=None):
        self.spawn_rate = spawn_rate
        self.rng = rng if rng is not None else random.Random()
        self.current_time = 0.0
        self.obstacle_types = _obstacle_types()

    def step(self, obstacles, delta_time):
        """Advance the timer; append and return a new obstacle when one is due."""
        self.current_time += delta_time
        if self.current_time <= self.spawn_rate:
            return None
        self.current_time -= self.spawn_rate

        rand = self.rng.randrange
        template = self.obstacle_types[rand(len(self.obstacle_types))]
        radius = template.radius
        side = rand(4)
        if side == 0:
            position = Vector2(SCREEN_WIDTH + radius, rand(SCREEN_HEIGHT) + 1)
            target = Vector2(0, rand(SCREEN_HEIGHT) + 1)
        elif side == 1:
            position = Vector2(rand(SCREEN_WIDTH) + 1, SCREEN_HEIGHT + radius)
            target = Vector2(rand(SCREEN_WIDTH) + 1, 0)
        elif side == 2:
            position = Vector2(-radius, rand(SCREEN_HEIGHT) + 1)
            target = Vector2(SCREEN_WIDTH, rand(SCREEN_HEIGHT) + 1)
        else:
            position = Vector2(rand(SCREEN_WIDTH) + 1, -radius)
            target = Vector2(rand(SCREEN_WIDTH) + 1, SCREEN_HEIGHT)

        direction = target - position
        direction = direction / direction.length() * _SPAWN_SPEED

        spawned = template.clone(position)
        spawned.rigidbody.accelerate(direction)
        obstacles.append(spawned)
        return spawned