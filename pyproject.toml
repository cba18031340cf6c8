[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foxgame"
version = "0.1.0"
description = "Game rules and state for a tile-based fox platformer: level records, player powerups, camera, particles, fades and UI widgets"
requires-python = ">=3.10"
dependencies = []
keywords = ["platformer", "game", "level", "2d", "tiles", "ui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["foxgame"]

[tool.hatch.build.targets.sdist]
include = ["foxgame", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
