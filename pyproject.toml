[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spartaquest"
version = "0.1.0"
description = "A turn-based text role-playing game for the terminal: fight monsters, level up, shop and upgrade gear, then face the dragon."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "text-game", "terminal", "turn-based"]
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
spartaquest = "spartaquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spartaquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
