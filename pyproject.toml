[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fillerbot"
version = "1.0.0"
description = "A Filler game player that reads the board and piece from standard input and answers with a placement."
requires-python = ">=3.10"
keywords = ["filler", "game", "bot", "board game"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fillerbot = "fillerbot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fillerbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
