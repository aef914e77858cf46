"""Simple screen widgets: a value bar and a clickable text button."""

from __future__ import annotations

import pygame
from pygame.math import Vector2

_BAR_OUTLINE = 2
_BUTTON_FILL = pygame.Color(0, 0, 0, 120)


class Bar:
    """A horizontal bar, centred on its position, showing a fraction of its width."""

    def __init__(self, position, color, max_width, height):
        self.position = Vector2(position) + Vector2(0, _BAR_OUTLINE)
        self.color = pygame.Color(color)
        self.max_width = float(max_width)
        self.height = float(height)
        self.width = self.max_width

    def update_length(self, value, max_value) -> None:
        """Size the filled part to ``value / max_value`` of the full width."""
        self.width = value / max_value * self.max_width

    def draw(self, surface) -> None:
        left = self.position.x - self.max_width / 2
        top = self.position.y
        if self.width > 0:
            pygame.draw.rect(
                surface,
                self.color,
                pygame.Rect(round(left), round(top), round(self.width), round(self.height)),
            )
        outline = pygame.Rect(
            round(left - _BAR_OUTLINE),
            round(top - _BAR_OUTLINE),
            round(self.max_width + 2 * _BAR_OUTLINE),
            round(self.height + 2 * _BAR_OUTLINE),
        )
        pygame.draw.rect(surface, self.color, outline, _BAR_OUTLINE)


class Button:
    """A translucent outlined rectangle with centred text.

    ``font`` is a font file path, or None for the default font.
    """

    def __init__(self, font, text, size, normal_color, hover_color, char_size, outline_thickness):
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(font, char_size)
        self.text = text
        self.size = Vector2(size)
        self.normal_color = pygame.Color(normal_color)
        self.hover_color = pygame.Color(hover_color)
        self.color = pygame.Color(normal_color)
        self.outline_thickness = outline_thickness
        self.position = Vector2()
        self.text_position = Vector2()

    def _bounds_size(self) -> Vector2:
        return self.size + Vector2(2 * self.outline_thickness, 2 * self.outline_thickness)

    def set_position(self, position) -> None:
        """Place the button and centre its text inside it."""
        self.position = Vector2(position)
        inner = self._bounds_size() - Vector2(self.outline_thickness, self.outline_thickness)
        text_width, text_height = self.font.size(self.text)
        self.text_position = Vector2(
            self.position.x + (inner.x - text_width) / 2,
            self.position.y + (inner.y - text_height) / 2,
        )

    def is_mouse_over(self, mouse_pos) -> bool:
        x, y = mouse_pos
        bounds = self._bounds_size()
        left, top = self.position
        return left < x < left + bounds.x and top < y < top + bounds.y

    def draw(self, surface) -> None:
        fill = pygame.Surface((round(self.size.x), round(self.size.y)), pygame.SRCALPHA)
        fill.fill(_BUTTON_FILL)
        surface.blit(fill, (round(self.position.x), round(self.position.y)))
        thickness = self.outline_thickness
        if thickness > 0:
            bounds = self._bounds_size()
            outline = pygame.Rect(
                round(self.position.x - thickness),
                round(self.position.y - thickness),
                round(bounds.x),
                round(bounds.y),
            )
            pygame.draw.rect(surface, self.color, outline, int(thickness))
        rendered = self.font.render(self.text, True, self.color)
        surface.blit(rendered, (round(self.text_position.x), round(self.text_position.y)))