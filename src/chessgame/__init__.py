"""Capture-the-king chess: rules engine plus a small PyQt6 board."""

__version__ = "0.1.0"
