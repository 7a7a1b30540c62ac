"""charsheet: derives a full tabletop character sheet from stored base attributes."""

__version__ = "0.1.0"
