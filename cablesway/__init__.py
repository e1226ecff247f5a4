"""Trajectory generation and oscillation experiments for cable-suspended robots."""

__version__ = "0.1.0"