"""Render, parse, validate and upload a document."""

from typing import Tuple

from ..document import load_document, validate_schema
from ..exceptions import InputError
from ..helpers.logger import get_logger
from ..helpers.uploader import upload_document
from ..helpers.ytt import render_with_ytt
from .config import ActionConfig

logger = get_logger("runner")


def acquire_document(config: ActionConfig) -> Tuple[str, str]:
    """
    Produce the raw document text and the path it came from.

    A configured template wins over a configured file.

    Raises:
        InputError: If neither input is set or the file cannot be read
        UnsupportedPlatformError, DownloadError, RenderError: From ytt
    """
    if not config.template and not config.file:
        raise InputError("Provide either 'file' or 'template'.")

    if config.template:
        logger.info(f"Rendering template {config.template}")
        raw = render_with_ytt(
            config.template,
            config.template_values,
            config.ytt_args,
            config.ytt_version,
        )
        return raw, config.template

    try:
        with open(config.file, "r", encoding="utf-8") as f:
            return f.read(), config.file
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read file {config.file}: {e}") from e


def run_pipeline(config: ActionConfig) -> str:
    """
    Run the import pipeline once.

    Args:
        config: Configuration snapshot

    Returns:
        Response body of the import endpoint

    Raises:
        ImportActionError: Any pipeline failure; nothing is uploaded
    """
    logger.debug(f"Pipeline configuration: {config.describe()}")

    raw, source_hint = acquire_document(config)
    document = load_document(raw, source_hint)
    logger.info(f"Loaded {document.format} document from {source_hint}")

    if config.validate_schema:
        validate_schema(document.data, config.schema_url)
        logger.info("Schema validation passed")
    else:
        logger.info("Schema validation skipped")

    return upload_document(document.data, config.token, config.endpoint)
