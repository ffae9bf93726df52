"""Building blocks for a website link checker."""

__version__ = "2.4.6"

__all__ = ["__version__"]