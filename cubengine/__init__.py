"""Raycaster building blocks: colours, images, XPM loading, player movement, ray setup and an in-memory display."""

__version__ = "0.1.0"