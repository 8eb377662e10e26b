"""Drag-and-drop task board service."""

__version__ = "1.0.0"
