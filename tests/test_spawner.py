import random

import pytest

from aysteroids.pool import SCREEN_HEIGHT, SCREEN_WIDTH, wall_collision_detected
from aysteroids.spawner import ObstacleSpawner


def test_no_spawn_before_rate_elapses():
    spawner = ObstacleSpawner(0.2, random.Random(0))
    obstacles = []
    assert spawner.step(obstacles, 0.1) is None
    assert obstacles == []


def test_time_accumulates_between_steps():
    spawner = ObstacleSpawner(0.2, random.Random(0))
    obstacles = []
    spawner.step(obstacles, 0.15)
    spawned = spawner.step(obstacles, 0.15)
    assert obstacles == [spawned]
    assert spawner.current_time == pytest.approx(0.1)


@pytest.mark.parametrize("seed", range(20))
def test_spawned_obstacle_starts_on_an_edge(seed):
    spawner = ObstacleSpawner(0.2, random.Random(seed))
    obstacles = []
    obs = spawner.step(obstacles, 0.3)
    r = obs.radius
    x, y = obs.position
    assert x == -r or x == SCREEN_WIDTH + r or y == -r or y == SCREEN_HEIGHT + r
    assert r in {t.radius for t in spawner.obstacle_types}
    assert obs.health == obs.max_health


@pytest.mark.parametrize("seed", range(20))
def test_spawned_obstacle_heads_into_the_screen(seed):
    spawner = ObstacleSpawner(0.2, random.Random(seed))
    obs = spawner.step([], 0.3)
    assert obs.velocity.length() == pytest.approx(4.0)
    obs.move()
    r = obs.radius
    assert not wall_collision_detected(obs, -r, SCREEN_WIDTH + r, SCREEN_HEIGHT + r, -r)


def test_spawned_obstacle_is_independent_of_template():
    spawner = ObstacleSpawner(0.2, random.Random(5))
    obs = spawner.step([], 0.3)
    templates = spawner.obstacle_types
    assert all(t is not obs for t in templates)
    assert all(t.velocity.length() == 0 for t in templates)