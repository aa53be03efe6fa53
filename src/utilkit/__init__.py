"""utilkit — small, pure helper functions plus a thin CLI."""

__version__ = "0.1.0"
