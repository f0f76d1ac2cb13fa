"""Building blocks for a logging engine: string and time helpers, byte streams and fixed-size item arrays."""

__version__ = "1.3.0"
__all__ = ["common", "filestream", "rawarray"]