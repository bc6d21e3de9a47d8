"""Blog catalog: resolve posts stored in a GitHub repository."""

__version__ = "0.1.0"
