[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handcricket"
version = "0.1.0"
description = "Hand cricket game logic: coin toss, two six-ball innings against the computer, and a saved high score"
requires-python = ">=3.10"
dependencies = []
keywords = ["cricket", "hand cricket", "game"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["handcricket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
