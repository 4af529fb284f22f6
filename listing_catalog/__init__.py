"""Marketplace listing catalog with proximity-ranked search."""

__version__ = "0.1.0"
