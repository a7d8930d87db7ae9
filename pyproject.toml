[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guessinggame"
version = "0.1.0"
description = "Building blocks for a number guessing game: game rules, SQLite storage for players and results, and raw HTTP message handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "number-guessing", "puzzle", "http", "sqlite", "leaderboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["guessinggame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
