[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aysteroids"
version = "0.1.0"
description = "An arcade shooter built on pygame: steer a ship, shoot drifting asteroids and score minerals."
requires-python = ">=3.10"
keywords = ["game", "arcade", "asteroids", "pygame", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aysteroids = "aysteroids.game:main"

[tool.hatch.build.targets.wheel]
packages = ["aysteroids"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
