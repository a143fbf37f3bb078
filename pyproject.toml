[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taquin"
version = "2.0.0"
description = "The classic sliding puzzle in 3x3, 4x4 and 5x5 sizes, played with the mouse or in a text console"
requires-python = ">=3.10"
keywords = ["puzzle", "sliding puzzle", "taquin", "15 puzzle", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taquin = "taquin.app:main"
taquin-demo = "taquin.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["taquin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
