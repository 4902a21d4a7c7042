"""Matching-pairs memory card game core."""

__version__ = "0.1.0"
