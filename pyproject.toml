[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tiphereth"
version = "0.1.0"
description = "Building blocks for a small top-down tile game: entities, tile maps, GUI widgets, a level editor screen and game screens."
requires-python = ">=3.10"
keywords = ["game", "tile map", "level editor", "pygame", "2d"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tiphereth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
