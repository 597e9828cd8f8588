[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "draughtscore"
version = "0.1.0"
description = "Board geometry, bitboards, position notation, hub protocol parsing and endgame bitbase indexing for international draughts"
requires-python = ">=3.10"
keywords = ["draughts", "checkers", "fen", "bitboard", "bitbase", "endgame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["draughtscore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
