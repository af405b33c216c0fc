[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bgkit"
version = "0.1.0"
description = "Building blocks for two-player board games: outcomes, WDL values, coordinates, bitboards, symmetries and engine protocol parsing."
requires-python = ">=3.10"
dependencies = []
keywords = ["board games", "bitboard", "ataxx", "go", "arimaa", "gtp", "uai", "aei", "wdl", "elo"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bgkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
