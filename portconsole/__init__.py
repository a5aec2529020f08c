"""Portconsole - line buffering engine for live device consoles."""

__version__ = "0.1.0"
