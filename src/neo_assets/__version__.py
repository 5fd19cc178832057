"""Version information for neo-assets."""

__version__ = "0.1.0"
