"""In-memory seat lock and booking service."""

__version__ = "1.0.0"
