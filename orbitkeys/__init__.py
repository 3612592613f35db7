"""Keyboard shortcut cheat sheets for applications, read from JSON and rendered as text."""

__version__ = "0.1.0"