[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mobagen"
version = "0.1.0"
description = "A small 2D engine for game AI experiments, with catch-the-cat and flocking simulations"
requires-python = ">=3.10"
keywords = ["game", "ai", "flocking", "boids", "simulation", "pygame", "hex-grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
catchthecat = "mobagen.catchthecat.world:main"
flocking = "mobagen.flocking.world:main"

[tool.hatch.build.targets.wheel]
packages = ["mobagen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
