"""Mortgage Calculator: single-screen mortgage payment calculator with scenario comparison."""

__version__ = "1.0.0"
