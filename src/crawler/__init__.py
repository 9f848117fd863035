"""Turn-based ASCII dungeon crawler."""

__version__ = "0.1.0"
