from __future__ import annotations


class GridConfigurationError(ValueError):
    """Raised when a grid slice or axis configuration is built with invalid parameters."""


class GridIndexError(IndexError):
    """Raised when a local index or track index falls outside its valid range."""
