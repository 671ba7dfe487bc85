"""Circles, rounded rectangles, text boxes, buttons and text inputs drawn with pygame, plus a demo window."""

__version__ = "0.1.0"
__all__ = ["vec", "ui", "events", "app"]