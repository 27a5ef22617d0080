[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "queens_solver"
version = "0.1.0"
description = "Read a colour-region queens puzzle from HTML or a screenshot and solve it"
requires-python = ">=3.10"
keywords = ["puzzle", "queens", "backtracking", "solver", "screenshot", "html"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "beautifulsoup4",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["queens_solver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
