"""Utility building blocks: options, enum bit operations, limits, locks, managers and streams."""

__version__ = "1.0.0"