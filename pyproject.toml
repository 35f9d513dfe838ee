[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockdrop"
version = "0.1.0"
description = "A small falling-block puzzle game played on a 10 by 20 grid."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "falling blocks", "tetromino", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
test = [
    "pytest",
]

[project.scripts]
blockdrop = "blockdrop.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blockdrop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
