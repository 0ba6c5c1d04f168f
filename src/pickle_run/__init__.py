"""Pickle Run: jump, collect every pickle, get the code."""

__version__ = "0.1.0"
