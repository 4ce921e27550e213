"""Travel booking cost calculator."""

__version__ = "1.0.0"
