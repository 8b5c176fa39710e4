"""Fetch a web page and report structural metadata about it."""

__version__ = "0.1.0"
