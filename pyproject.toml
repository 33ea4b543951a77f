[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ptsd"
version = "0.1.0"
description = "A small 2D game framework on pygame: scene objects, sprites, text, animation, input, timing and audio, with a sample phase-based game"
requires-python = ">=3.10"
keywords = ["game", "2d", "framework", "pygame", "sprites", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ptsd-game = "ptsd.game.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ptsd"]

[tool.pytest.ini_options]
addopts = "-ra"
