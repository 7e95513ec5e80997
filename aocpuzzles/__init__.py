"""Solvers and console commands for a series of December programming puzzles."""

__version__ = "0.1.0"