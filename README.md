# aysteroids

aysteroids is an arcade shooter built on pygame. You pilot a small ship on a 2560×1600
playfield. Asteroids of five sizes drift in from random screen edges, and you shoot them or
ram them. Asteroids bounce off each other in elastic collisions and take damage when they
hit. They also push your ship around and wear its health down. The round ends when the
health bar under the ship runs out.

## Installing

```
pip install .
```

This also installs `pygame`.

## Playing

```
aysteroids
```

Options:

- `--regular-font PATH`: font file for the score counter and the controls line
- `--bold-font PATH`: font file for the title, the "Game Over" text and the buttons
- `--windowed`: open an ordinary window instead of running fullscreen

If you leave out the font options, pygame's default font is used.

Controls:

- **W A S D**: thrust up, left, down and right
- **Mouse**: aim the gun
- **Left mouse button**: fire (the gun reloads for 0.2 s between shots)
- **Escape**, or closing the window: quit

The start screen has a *Start Game* button and a *Quit Game* button. During play, the
"Minerals" counter in the top-left corner goes up whenever an asteroid is destroyed by
hitting your ship or one of your shots. It rises by that asteroid's damage value. When the
game is over you can choose *Restart Game* or go back to the *Main Menu*. Starting a new
round resets the counter to zero.

## Using the pieces

Each part of the game is a module of its own:

- `aysteroids.rigidbody`: `Rigidbody` (velocity, friction, mass, `accelerate`, `move`) and
  `CircleCollider`
- `aysteroids.obstacle`: `Obstacle`, a circular body with health, damage, a collider and a
  rigid body. `clone` copies one to a new position.
- `aysteroids.collision`: `collision_detected` separates two overlapping obstacles and
  reports whether they overlapped. `collision_response` gives them the velocities of an
  elastic collision.
- `aysteroids.particles`: `Particle` and `ParticleSystem`, the debris thrown off by hits and
  shots
- `aysteroids.pool`: `ObstaclePool` and `wall_collision_detected`. The pool moves, collides
  and draws bodies, and drops the ones that are dead or off screen.
- `aysteroids.spawner`: `ObstacleSpawner`, whose `step` launches an asteroid from a random
  edge once every `spawn_rate` seconds
- `aysteroids.starfield`: `Star` and `Starfield`, the scrolling background
- `aysteroids.gun`, `aysteroids.player`: `Gun` and `Player`, the ship and its gun
- `aysteroids.score`: `ScoreSystem` (score, highscore and a change callback) and a
  `Mineral` record
- `aysteroids.widgets`: `Bar` (the health bar) and `Button`
- `aysteroids.ui`: `UI` and the `GameState` enum. The screen methods return the state that
  a click asks for.
- `aysteroids.game`: `Game` runs one frame at a time from an `InputState`. `main` opens the
  window and runs the loop.

`Game`, `Starfield`, `ObstacleSpawner` and `ParticleSystem` each take an `rng` argument,
such as a `random.Random`. Give them a seeded generator and the random events happen the
same way on every run.

## What it does not do

- The highscore is kept in `ScoreSystem.highscore`, but it is never shown on screen and never
  saved between runs.
- `Mineral` is only a data record. No mineral objects appear in the game to be picked up.
- There is no sound and no settings screen.

## Running the tests

```
pip install .[test]
pytest
```