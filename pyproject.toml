[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "silenced"
version = "0.1.0"
description = "A small tile-based 2D role-playing game engine built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "rpg", "tilemap", "pygame", "2d"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
silenced = "silenced.main:main"

[tool.hatch.build.targets.wheel]
packages = ["silenced"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
