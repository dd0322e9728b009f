"""Ordered lookups of values from environment variables, files and nested maps."""

__version__ = "0.1.0"
__all__ = ["sources"]