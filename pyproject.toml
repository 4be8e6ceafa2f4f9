[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "halma"
version = "0.1.0"
description = "Halma on an 8x8 board for the terminal, for two players or against a greedy computer player"
requires-python = ">=3.10"
dependencies = []
keywords = ["halma", "board game", "terminal game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
halma = "halma.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["halma"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
