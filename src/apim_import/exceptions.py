"""Exceptions raised by the import pipeline.

Every error is terminal for a run. They propagate unchanged to the ``run``
command, which reports the message and exits non-zero.
"""

from typing import List, Optional


class ImportActionError(Exception):
    """Base class for all import pipeline errors."""

    pass


class ConfigurationError(ImportActionError):
    """A required input is missing or blank."""

    pass


class InputError(ImportActionError):
    """No usable document source was configured or it could not be read."""

    pass


class UnsupportedPlatformError(ImportActionError):
    """No ytt release asset exists for the current OS or architecture."""

    pass


class DownloadError(ImportActionError):
    """The ytt release asset could not be downloaded."""

    pass


class RenderError(ImportActionError):
    """ytt failed to start, exited non-zero or produced too much output."""

    pass


class ParseError(ImportActionError):
    """The document text is not valid JSON or YAML."""

    pass


class SchemaFetchError(ImportActionError):
    """The JSON Schema could not be fetched or compiled."""

    pass


class SchemaValidationError(ImportActionError):
    """The document violates the JSON Schema."""

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__("Schema validation failed:\n" + "\n".join(self.violations))


class UploadError(ImportActionError):
    """The import endpoint rejected the document."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: str = "",
    ):
        self.status_code = status_code
        self.body = body
        super().__init__(message)
