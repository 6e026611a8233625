"""Matrices, timers, 2D physics, Wavefront mesh loading and shape geometry for an asteroid field game."""

__version__ = "0.1.0"