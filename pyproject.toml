[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "entropy-game"
version = "0.1.0"
description = "A small side-scrolling platformer with tile collision, jumping and a following camera."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "side-scroller", "pygame", "tiles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
entropy-game = "entropy_game.app:main"

[tool.hatch.build.targets.wheel]
packages = ["entropy_game"]

[tool.pytest.ini_options]
addopts = "-ra"
