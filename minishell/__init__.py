"""Environment handling and C-style string, byte, formatting and line-reading helpers for a small shell."""

__version__ = "0.1.0"