[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dinorun"
version = "0.1.0"
description = "A small side-scrolling runner game for ANSI terminals: jump the cacti, collect the coins"
requires-python = ">=3.10"
keywords = ["game", "terminal", "ansi", "runner", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dinorun = "dinorun.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dinorun"]

[tool.pytest.ini_options]
addopts = "-ra"
