[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katanuki"
version = "0.1.0"
description = "Board model and A* solver for the die-cutting piece-shifting puzzle"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "a-star", "search", "board", "die-cutting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
katanuki = "katanuki.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["katanuki"]

[tool.pytest.ini_options]
addopts = "-ra"
