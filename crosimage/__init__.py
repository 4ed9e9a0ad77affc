"""Folder thumbnail composition, thumbnail grid layout and text utilities for an image browser."""

__version__ = "0.1.0"