[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "binairo"
version = "1.0.0"
description = "Binairo (binary puzzle) game with a desktop board and a scriptable game engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["binairo", "takuzu", "binary puzzle", "puzzle", "game", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
binairo = "binairo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["binairo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
