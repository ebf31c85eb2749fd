[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uyta"
version = "0.1.0"
description = "A small island farming game: plant crops and trees, hire workers, expand your land."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "farming", "simulation", "pygame", "idle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
uyta = "uyta.app:main"

[tool.hatch.build.targets.wheel]
packages = ["uyta"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
