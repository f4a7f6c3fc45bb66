[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "octoverso"
version = "0.1.0"
description = "Pieces of a two-player letter game: a bag of letters, player racks, a two-sided rail and a word list."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "words", "letters", "board-game"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
octoverso = "octoverso.jeu:main"

[tool.hatch.build.targets.wheel]
packages = ["octoverso"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
