"""Game logic for a top-down arcade shooter."""

__version__ = "0.1.0"