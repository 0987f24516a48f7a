"""Nearby places search, route preview and navigation handoff."""

__version__ = "0.1.0"
