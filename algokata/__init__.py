"""Classic array, string, linked-list and tree exercises, plus small hand-built containers."""

__version__ = "0.1.0"