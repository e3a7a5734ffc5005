"""Clarify - weighted decision analysis API."""

__version__ = "1.0.0"
