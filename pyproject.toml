[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quarto-game"
version = "0.1.0"
description = "Two-player Quarto board game played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["quarto", "board game", "terminal", "two players"]
classifiers = [
    "Development Status :: 4 - Beta",
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
quarto = "quarto_game.console:main"

[tool.hatch.build.targets.wheel]
packages = ["quarto_game"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
