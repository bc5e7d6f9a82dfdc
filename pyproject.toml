[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonrun"
version = "0.1.0"
description = "A small turn-based text role-playing game: name a hero, fight monsters, collect potions and level up."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "turn-based", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeonrun = "dungeonrun.main:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
