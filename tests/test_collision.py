import math

import pygame
import pytest
from pygame.math import Vector2

from aysteroids.collision import collision_detected, collision_response
from aysteroids.obstacle import Obstacle


def _make(position, radius=10, mass=1, velocity=(0, 0)):
    obstacle = Obstacle(position, pygame.Color("white"), radius, 0.0, 1, 5, mass)
    obstacle.velocity = velocity
    return obstacle


def _momentum(*obstacles):
    total = Vector2()
    for obstacle in obstacles:
        total += obstacle.velocity * obstacle.rigidbody.mass
    return total


def _energy(*obstacles):
    return sum(0.5 * o.rigidbody.mass * o.velocity.length_squared() for o in obstacles)


def test_separated_circles_do_not_collide():
    a = _make((0, 0))
    b = _make((50, 0))
    assert collision_detected(a, b) is False
    assert a.position == Vector2(0, 0)
    assert b.position == Vector2(50, 0)


def test_touching_circles_do_not_collide():
    a = _make((0, 0))
    b = _make((20, 0))
    assert collision_detected(a, b) is False


def test_overlap_is_resolved_symmetrically():
    a = _make((0, 0))
    b = _make((6, 8))
    midpoint = (a.position + b.position) / 2
    assert collision_detected(a, b) is True
    assert a.position.distance_to(b.position) == pytest.approx(20)
    new_midpoint = (a.position + b.position) / 2
    assert new_midpoint.x == pytest.approx(midpoint.x)
    assert new_midpoint.y == pytest.approx(midpoint.y)


def test_coincident_centres_are_separated():
    a = _make((5, 5))
    b = _make((5, 5))
    assert collision_detected(a, b) is True
    assert a.position.distance_to(b.position) == pytest.approx(20)
    assert all(math.isfinite(c) for c in (*a.position, *b.position))


def test_equal_masses_head_on_swap_velocities():
    a = _make((0, 0), velocity=(1, 0))
    b = _make((15, 0), velocity=(-1, 0))
    collision_response(a, b)
    assert a.velocity.x == pytest.approx(-1)
    assert a.velocity.y == pytest.approx(0)
    assert b.velocity.x == pytest.approx(1)
    assert b.velocity.y == pytest.approx(0)


def test_tangential_motion_is_unchanged():
    a = _make((0, 0), velocity=(0, 2))
    b = _make((10, 0), velocity=(0, -1))
    collision_response(a, b)
    assert a.velocity.x == pytest.approx(0)
    assert a.velocity.y == pytest.approx(2)
    assert b.velocity.y == pytest.approx(-1)


def test_momentum_and_energy_are_conserved():
    a = _make((0, 0), mass=1, velocity=(2, 1))
    b = _make((12, 5), mass=3, velocity=(-1, 0.5))
    momentum = _momentum(a, b)
    energy = _energy(a, b)
    collision_response(a, b)
    after = _momentum(a, b)
    assert after.x == pytest.approx(momentum.x)
    assert after.y == pytest.approx(momentum.y)
    assert _energy(a, b) == pytest.approx(energy)


def test_response_leaves_positions_alone():
    a = _make((0, 0), velocity=(1, 0))
    b = _make((15, 0), velocity=(-1, 0))
    collision_response(a, b)
    assert a.position == Vector2(0, 0)
    assert b.position == Vector2(15, 0)