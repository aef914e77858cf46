import random

import pygame
from pygame.math import Vector2

from aysteroids.particles import Particle, ParticleSystem


def _lit_pixels(surface):
    width, height = surface.get_size()
    return sum(
        1
        for x in range(width)
        for y in range(height)
        if tuple(surface.get_at((x, y)))[:3] != (0, 0, 0)
    )


def test_default_particle():
    particle = Particle()
    assert particle.radius == 2
    assert particle.outline_thickness == 2
    assert particle.color == pygame.Color(0, 255, 0)
    assert particle.rigidbody.friction == 0
    assert particle.position == Vector2(0, 0)


def test_spawn_copies_style():
    template = Particle((0, 0), (0, 0), pygame.Color(10, 20, 30), 4, 1, 0.0)
    spawned = template.spawn((5, 6), (1, 1))
    assert spawned.color == template.color
    assert spawned.radius == template.radius
    assert spawned.outline_thickness == template.outline_thickness
    assert spawned.rigidbody.friction == template.rigidbody.friction
    assert spawned.position == Vector2(5, 6)
    assert spawned.rigidbody.velocity == Vector2(1, 1)


def test_spawn_does_not_share_color_or_position():
    template = Particle()
    origin = Vector2(1, 1)
    spawned = template.spawn(origin, (0, 0))
    origin.x = 50
    spawned.fade_out(6)
    assert spawned.position == Vector2(1, 1)
    assert template.color.a == 255


def test_fade_out_lowers_alpha_by_speed():
    particle = Particle()
    before = particle.color.a
    assert particle.fade_out(6) is False
    assert particle.color.a == before - 6


def test_fade_out_eventually_reports_invisible():
    particle = Particle()
    steps = 1
    while not particle.fade_out(6):
        steps += 1
    assert steps > 1
    assert particle.color.a == 0


def test_move_follows_velocity():
    particle = Particle((10, 10), (2, -3))
    particle.move()
    assert particle.position == Vector2(10, 10) + Vector2(2, -3)


def test_draw_marks_pixels_near_particle():
    surface = pygame.Surface((20, 20))
    Particle((10, 10)).draw(surface)
    assert _lit_pixels(surface) > 0


def test_draw_far_away_leaves_surface_blank():
    surface = pygame.Surface((20, 20))
    Particle((200, 200)).draw(surface)
    assert _lit_pixels(surface) == 0


def test_explode_spawns_requested_amount_in_speed_range():
    system = ParticleSystem(random.Random(1))
    system.explode(Particle(), Vector2(3, 4), 8, 5)
    assert len(system.particles) == 8
    for particle in system.particles:
        assert particle.position == Vector2(3, 4)
        assert -2 <= particle.rigidbody.velocity.x < 5 - 2
        assert -2 <= particle.rigidbody.velocity.y < 5 - 2


def test_explode_is_reproducible_with_seed():
    first = ParticleSystem(random.Random(7))
    second = ParticleSystem(random.Random(7))
    first.explode(Particle(), (0, 0), 6, 5)
    second.explode(Particle(), (0, 0), 6, 5)
    assert [p.rigidbody.velocity for p in first.particles] == [
        p.rigidbody.velocity for p in second.particles
    ]


def test_update_moves_particles_and_keeps_visible_ones():
    system = ParticleSystem(random.Random(3))
    system.explode(Particle(), (20, 20), 3, 5)
    expected = [p.position + p.rigidbody.velocity for p in system.particles]
    system.update(pygame.Surface((40, 40)), 0.016)
    assert len(system.particles) == 3
    assert [p.position for p in system.particles] == expected


def test_update_removes_faded_particles():
    system = ParticleSystem(random.Random(3))
    system.explode(Particle(), (20, 20), 4, 5)
    surface = pygame.Surface((40, 40))
    for _ in range(60):
        system.update(surface, 0.016)
    assert system.particles == []