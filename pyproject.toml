[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "torrehanoi"
version = "0.1.0"
description = "Animated Towers of Hanoi with pause, speed control and replay of saved solutions"
requires-python = ">=3.10"
keywords = ["hanoi", "towers of hanoi", "puzzle", "animation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
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
torrehanoi = "torrehanoi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["torrehanoi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
