"""Contact-center queue dashboard core."""

__version__ = "1.0.0"
