"""Fuzzy path completion backed by fd."""

__version__ = "0.1.0"
