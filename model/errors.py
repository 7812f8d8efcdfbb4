from __future__ import annotations


class InvalidThemeError(ValueError):
    """Theme sequences are not 12 long, or hold values the resolver cannot use."""


class InvalidRangeError(ValueError):
    """Symmetric layout was given something other than 13 consecutive pitches."""


class InvalidIndexError(IndexError):
    """Interval class outside 0..11 used to index a theme."""
