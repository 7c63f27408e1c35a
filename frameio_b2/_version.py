"""Version information for frameio-b2."""

__version__ = "1.0.0"
