"""Circle overlap detection and two-dimensional elastic collision response."""

from __future__ import annotations

from pygame.math import Vector2


def _unit(vector: Vector2) -> Vector2:
    length = vector.length()
    if length == 0:
        # Coincident centres have no defined normal; pick the x axis.
        return Vector2(1, 0)
    return vector / length


def collision_detected(obs1, obs2) -> bool:
    """Return True if the two circles overlap, pushing them apart evenly."""
    offset = obs2.position - obs1.position
    radii_sum = obs1.collider.radius + obs2.collider.radius
    distance = offset.length()
    if distance >= radii_sum:
        return False
    displacement = 0.5 * _unit(offset) * (radii_sum - distance)
    obs1.position = obs1.position - displacement
    obs2.position = obs2.position + displacement
    return True


def collision_response(obs1, obs2) -> None:
    """Set both velocities to the outcome of an elastic collision."""
    normal = _unit(obs2.position - obs1.position)
    tangent = Vector2(-normal.y, normal.x)

    v1 = obs1.velocity
    v2 = obs2.velocity
    normal1 = normal.dot(v1)
    tangent1 = tangent.dot(v1)
    normal2 = normal.dot(v2)
    tangent2 = tangent.dot(v2)

    mass1 = obs1.rigidbody.mass
    mass2 = obs2.rigidbody.mass
    total = mass1 + mass2
    final_normal1 = (normal1 * (mass1 - mass2) + 2 * mass2 * normal2) / total
    final_normal2 = (normal2 * (mass2 - mass1) + 2 * mass1 * normal1) / total

    obs1.rigidbody.velocity = normal * final_normal1 + tangent * tangent1
    obs2.rigidbody.velocity = normal * final_normal2 + tangent * tangent2