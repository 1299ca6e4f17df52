"""
Pipeline module for the import action.

Contains the action configuration and the render, parse, validate and
upload sequence.
"""

from .config import ActionConfig
from .runner import acquire_document, run_pipeline

__all__ = [
    "ActionConfig",
    "acquire_document",
    "run_pipeline",
]
