"""APImetrics import action - render, validate and upload API monitoring definitions."""

__version__ = "1.0.0"
