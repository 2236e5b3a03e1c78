"""Sliding tile puzzle (2048) engine with undo, autoplay and a gymnasium env."""

__version__ = "0.1.0"
