"""Workout logging CLI with heuristic training suggestions."""

__version__ = "0.1.0"
