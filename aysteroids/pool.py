"""The live obstacles and player projectiles, and how they interact."""

from __future__ import annotations

from .collision import collision_detected, collision_response

SCREEN_WIDTH = 2560
SCREEN_HEIGHT = 1600


def wall_collision_detected(obs, left, right, bottom, top) -> bool:
    """Return True if the obstacle's centre lies outside the given boundaries."""
    x, y = obs.position
    return x < left or x > right or y < top or y > bottom


def _outside_screen(obs) -> bool:
    r = obs.radius
    return wall_collision_detected(obs, -r, SCREEN_WIDTH + r, SCREEN_HEIGHT + r, -r)


class ObstaclePool:
    """Holds hostile obstacles and player-side bodies (the player and its shots)."""

    def __init__(self):
        self.obstacles: list = []
        self.player_obstacles: list = []

    def obstacle_interaction(self, particle_system, score_system) -> None:
        """Resolve collisions, award score for kills and drop dead or escaped bodies."""
        for obs1 in self.obstacles:
            for obs2 in self.obstacles:
                if obs1 is not obs2 and collision_detected(obs1, obs2):
                    collision_response(obs1, obs2)
                    obs1.get_hit(particle_system, obs2.damage)
                    obs2.get_hit(particle_system, obs1.damage)

            for player_obs in self.player_obstacles:
                if collision_detected(obs1, player_obs):
                    collision_response(obs1, player_obs)
                    obs1.get_hit(particle_system, player_obs.damage)
                    player_obs.get_hit(particle_system, obs1.damage)
                    if obs1.dead:
                        score_system.add_score(obs1.damage)

        self.obstacles = [
            obs for obs in self.obstacles if not obs.dead and not _outside_screen(obs)
        ]
        self.player_obstacles = [
            obs
            for obs in self.player_obstacles
            if not obs.dead and not _outside_screen(obs)
        ]

    def move(self) -> None:
        """Advance every body by one step."""
        for obs in self.obstacles:
            obs.update()
        for obs in self.player_obstacles:
            obs.update()

    def draw(self, surface) -> None:
        for obs in self.obstacles:
            obs.draw(surface)
        for obs in self.player_obstacles:
            obs.draw(surface)