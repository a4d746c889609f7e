"""Widgets, data models and drawing helpers for a five-screen desk dashboard."""

__version__ = "0.1.0"