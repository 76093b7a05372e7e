"""Inkwell: blog API with JWT authentication and author-owned posts."""

__version__ = "0.1.0"
