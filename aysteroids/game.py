"""The game loop: states, per-frame update and the program entry point."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

import pygame
from pygame.math import Vector2

from .particles import ParticleSystem
from .player import Player
from .pool import SCREEN_HEIGHT, SCREEN_WIDTH, ObstaclePool
from .score import ScoreSystem
from .spawner import ObstacleSpawner
from .starfield import Starfield
from .ui import UI, GameState

_PLAYER_START = Vector2(1280.0, 800.0)
_BACKGROUND = (0, 0, 20)
_FRAME_RATE = 60


@dataclass
class InputState:
    """The mouse and movement keys as sampled for one frame."""

    mouse_pos: tuple = (0, 0)
    mouse_pressed: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False


class Game:
    """Owns every game object and advances them one frame at a time."""

    def __init__(self, regular_font=None, bold_font=None, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.START
        self.ui = UI(0, regular_font, bold_font)
        self.score_system = ScoreSystem(self.ui.update_score)
        self.starfield = Starfield(0.1, self.rng)
        self.spawner = ObstacleSpawner(0.2, self.rng)
        self.pool = ObstaclePool()
        self.particle_system = ParticleSystem(self.rng)
        self.player = Player()
        self.player.position = _PLAYER_START

    @property
    def running(self) -> bool:
        return self.state is not GameState.QUIT

    def change_state(self, state) -> None:
        self.state = GameState(state)

    def update(self, surface, delta_time, inputs) -> None:
        """Advance and draw one frame."""
        self.starfield.update(surface, delta_time)
        self.particle_system.update(surface, delta_time)
        if any(obs is self.player for obs in self.pool.player_obstacles):
            self.player.steer(inputs.left, inputs.right, inputs.up, inputs.down)
        self.pool.move()
        self.pool.draw(surface)

        if self.state is GameState.START:
            requested = self.ui.start_screen(surface, inputs.mouse_pos, inputs.mouse_pressed)
            if requested is not None:
                self.state = requested
        elif self.state is GameState.PLAY:
            self.spawner.step(self.pool.obstacles, delta_time)
            self.player.update_gun(
                self.particle_system,
                self.pool,
                inputs.mouse_pos,
                inputs.mouse_pressed,
                delta_time,
            )
            self.pool.obstacle_interaction(self.particle_system, self.score_system)
            if self.player.dead:
                self.state = GameState.GAME_OVER
            self.ui.play_screen(surface)
        elif self.state is GameState.GAME_OVER:
            requested = self.ui.game_over_screen(
                surface, inputs.mouse_pos, inputs.mouse_pressed
            )
            if requested is not None:
                self.state = requested
        elif self.state is GameState.RESET:
            self._reset()

    def _reset(self) -> None:
        player = self.player
        player.health = player.max_health
        player.position = _PLAYER_START
        player.dead = False
        if not any(obs is player for obs in self.pool.player_obstacles):
            self.pool.player_obstacles.append(player)
        self.score_system.highscore = self.score_system.score
        self.score_system.score = 0
        self.state = GameState.PLAY


def _read_inputs() -> InputState:
    keys = pygame.key.get_pressed()
    return InputState(
        mouse_pos=pygame.mouse.get_pos(),
        mouse_pressed=pygame.mouse.get_pressed()[0],
        left=keys[pygame.K_a],
        right=keys[pygame.K_d],
        up=keys[pygame.K_w],
        down=keys[pygame.K_s],
    )


def main(argv=None) -> int:
    """Run the game until the window is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="aysteroids")
    parser.add_argument("--regular-font", default=None, help="path of the regular font file")
    parser.add_argument("--bold-font", default=None, help="path of the bold font file")
    parser.add_argument("--windowed", action="store_true", help="do not run fullscreen")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        flags = 0 if args.windowed else pygame.FULLSCREEN
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)
        pygame.display.set_caption("Game")
        game = Game(args.regular_font, args.bold_font)
        clock = pygame.time.Clock()

        while game.running:
            delta_time = clock.tick(_FRAME_RATE) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.change_state(GameState.QUIT)
            if pygame.key.get_pressed()[pygame.K_ESCAPE]:
                game.change_state(GameState.QUIT)
            if not game.running:
                break

            screen.fill(_BACKGROUND)
            game.update(screen, delta_time, _read_inputs())
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0