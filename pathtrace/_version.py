"""Version information for pathtrace."""

__version__ = "0.3.0"
