[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doomcaster"
version = "1.0.0"
description = "Building blocks for a small raycasting first-person shooter: map, player, ray casting, enemies, effects and saves"
requires-python = ">=3.10"
keywords = ["game", "raycaster", "fps", "pygame", "retro"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["doomcaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
