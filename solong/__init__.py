"""Map validation, winnability checking and XPM loading for a tile puzzle game."""

__version__ = "1.0.0"