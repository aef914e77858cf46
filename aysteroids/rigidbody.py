"""Point-mass motion and circular collision bounds sharing a position vector."""

from __future__ import annotations

from pygame.math import Vector2


def _shared_vector(position) -> Vector2:
    """Return ``position`` itself if it is a vector, otherwise a new vector."""
    if position is None:
        return Vector2()
    if isinstance(position, Vector2):
        return position
    return Vector2(position)


class Rigidbody:
    """Moves a (possibly shared) position vector by its velocity each step."""

    def __init__(self, position=None, velocity=(0.0, 0.0), friction=0.0, mass=1):
        self.position = _shared_vector(position)
        self.velocity = Vector2(velocity)
        self.friction = friction
        self.mass = mass

    def accelerate(self, acceleration) -> None:
        """Add ``acceleration`` to the velocity."""
        self.velocity = self.velocity + Vector2(acceleration)

    def move(self) -> None:
        """Advance the position by the velocity, then apply friction."""
        self.position.update(self.position + self.velocity)
        self.accelerate(self.velocity * -self.friction)


class CircleCollider:
    """A circle of integer radius centred on a (possibly shared) position."""

    def __init__(self, position=None, radius=10):
        self.position = _shared_vector(position)
        self.radius = radius