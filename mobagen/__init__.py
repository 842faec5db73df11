"""A small 2D engine for game AI experiments, with two example simulations."""

__version__ = "0.1.0"