"""Menu, in-game and game-over screens with their buttons and labels."""

from __future__ import annotations

from enum import Enum

import pygame
from pygame.math import Vector2

from .widgets import Button

_GREY = pygame.Color(180, 180, 180, 255)
_DARK_RED = pygame.Color(180, 0, 0, 255)
_WHITE = pygame.Color(255, 255, 255)
_RED = pygame.Color(255, 0, 0)
_BUTTON_SIZE = (300.0, 80.0)
_BUTTON_CHAR_SIZE = 24
_BUTTON_OUTLINE = 6


class GameState(Enum):
    """What the game is doing this frame."""

    START = 0
    PLAY = 1
    GAME_OVER = 2
    RESET = 3
    QUIT = 4


class _Label:
    """A line of text drawn at a fixed position."""

    def __init__(self, font_path, text, char_size, position, color=_WHITE):
        self.font = pygame.font.Font(font_path, char_size)
        self.text = text
        self.position = Vector2(position)
        self.color = pygame.Color(color)

    def draw(self, surface) -> None:
        rendered = self.font.render(self.text, True, self.color)
        surface.blit(rendered, (round(self.position.x), round(self.position.y)))


def _hover(button: Button, mouse_pos, mouse_pressed) -> bool:
    """Colour the button by hover state; return True if it was clicked."""
    if button.is_mouse_over(mouse_pos):
        button.color = pygame.Color(button.hover_color)
        return bool(mouse_pressed)
    button.color = pygame.Color(button.normal_color)
    return False


class UI:
    """Draws the screens and reports which state a click asks for.

    ``regular_font`` and ``bold_font`` are font file paths, or None for the
    default font.
    """

    def __init__(self, score=0, regular_font=None, bold_font=None):
        if not pygame.font.get_init():
            pygame.font.init()
        self.start_button = Button(
            bold_font, "Start Game", _BUTTON_SIZE, _GREY, _WHITE,
            _BUTTON_CHAR_SIZE, _BUTTON_OUTLINE,
        )
        self.restart_button = Button(
            bold_font, "Restart Game", _BUTTON_SIZE, _DARK_RED, _RED,
            _BUTTON_CHAR_SIZE, _BUTTON_OUTLINE,
        )
        self.main_button = Button(
            bold_font, "Main Menu", _BUTTON_SIZE, _GREY, _WHITE,
            _BUTTON_CHAR_SIZE, _BUTTON_OUTLINE,
        )
        self.quit_button = Button(
            bold_font, "Quit Game", _BUTTON_SIZE, _DARK_RED, _RED,
            _BUTTON_CHAR_SIZE, _BUTTON_OUTLINE,
        )
        self.start_button.set_position((1130.0, 900.0))
        self.restart_button.set_position((1130.0, 1180.0))
        self.main_button.set_position((1130.0, 1080.0))
        self.quit_button.set_position((1130.0, 1000.0))

        self.title = _Label(bold_font, "Aysteroids", 80, (930.0, 450.0))
        self.game_over = _Label(bold_font, "Game Over", 80, (950.0, 450.0), _RED)
        self.minerals = _Label(regular_font, "", 24, (10.0, 10.0))
        self.controls = _Label(
            regular_font,
            "WASD to move - Mouse to aim - Collect Minerals!",
            18,
            (40.0, 1460.0),
        )
        self.update_score(score)

    @property
    def minerals_text(self) -> str:
        return self.minerals.text

    def update_score(self, score) -> None:
        self.minerals.text = f"Minerals: {score}"

    def start_screen(self, surface, mouse_pos, mouse_pressed):
        """Draw the title screen; return the state a click requests, or None."""
        requested = None
        if _hover(self.start_button, mouse_pos, mouse_pressed):
            requested = GameState.RESET
        if _hover(self.quit_button, mouse_pos, mouse_pressed):
            requested = GameState.QUIT

        self.start_button.draw(surface)
        self.quit_button.draw(surface)
        self.title.draw(surface)
        self.controls.draw(surface)
        return requested

    def play_screen(self, surface) -> None:
        self.minerals.draw(surface)

    def game_over_screen(self, surface, mouse_pos, mouse_pressed):
        """Draw the game-over screen; return the state a click requests, or None."""
        requested = None
        if _hover(self.restart_button, mouse_pos, mouse_pressed):
            requested = GameState.RESET
        if _hover(self.main_button, mouse_pos, mouse_pressed):
            requested = GameState.START

        self.restart_button.draw(surface)
        self.main_button.draw(surface)
        self.game_over.draw(surface)
        self.minerals.draw(surface)
        self.controls.draw(surface)
        return requested