"""In-memory folder/key-value cache served over a line-based TCP protocol."""

__version__ = "0.1.0"
__all__ = ["server", "tree"]