[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilebox"
version = "0.1.0"
description = "A small tile-and-sprite fantasy console, with playfield and palette pieces for a falling-block puzzle game"
requires-python = ">=3.10"
keywords = [
    "tiles",
    "sprites",
    "fantasy-console",
    "puzzle",
    "playfield",
    "fixed-point",
    "vector",
    "prng",
]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tilebox"]

[tool.pytest.ini_options]
addopts = "-ra"
