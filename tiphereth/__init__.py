"""Entities, tile maps, GUI widgets and game and editor screens for a top-down tile game."""

__version__ = "0.1.0"