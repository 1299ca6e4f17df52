"""
Document module for the import action.

Contains document parsing and JSON Schema validation.
"""

from .loader import FORMAT_JSON, FORMAT_YAML, LoadedDocument, load_document
from .validation import fetch_schema, validate_document_schema, validate_schema

__all__ = [
    "FORMAT_JSON",
    "FORMAT_YAML",
    "LoadedDocument",
    "fetch_schema",
    "load_document",
    "validate_document_schema",
    "validate_schema",
]
