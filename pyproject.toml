[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilerunner"
version = "0.1.0"
description = "A tile-based side-scrolling platform game built on pygame"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "platformer", "side-scroller", "pygame", "tilemap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tilerunner = "tilerunner.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tilerunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
