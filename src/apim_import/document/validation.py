"""
JSON Schema validation for import documents.
"""

from typing import Any, Dict, List

import jsonschema
import requests

from ..constants import HTTP_TIMEOUT
from ..exceptions import SchemaFetchError, SchemaValidationError
from ..helpers.logger import get_logger

logger = get_logger("validation")


def fetch_schema(schema_url: str) -> Dict[str, Any]:
    """
    Fetch a JSON Schema document.

    Raises:
        SchemaFetchError: If the request fails or the body is not JSON
    """
    logger.debug(f"Fetching schema from {schema_url}")
    try:
        response = requests.get(schema_url, timeout=HTTP_TIMEOUT)
    except (requests.exceptions.RequestException, ConnectionError) as e:
        raise SchemaFetchError(f"Failed to fetch schema: {e}") from e

    if not response.ok:
        raise SchemaFetchError(
            f"Failed to fetch schema: {response.status_code} {response.reason}"
        )

    try:
        return response.json()
    except ValueError as e:
        raise SchemaFetchError(f"Schema at {schema_url} is not valid JSON: {e}") from e


def format_violation(error: jsonschema.ValidationError) -> str:
    """Render one violation as a single line."""
    path = (
        " -> ".join(str(p) for p in error.absolute_path)
        if error.absolute_path
        else "root"
    )
    message = " ".join(error.message.splitlines())
    return f"Path '{path}': {message}"


def validate_document_schema(document: Any, schema: Dict[str, Any]) -> List[str]:
    """
    Validate a document against a Draft-04 schema.

    Unknown schema keywords are ignored and all registered format checkers
    are enabled.

    Args:
        document: Parsed document
        schema: JSON Schema

    Returns:
        Every violation, one line each, in the order the validator reports them

    Raises:
        SchemaFetchError: If the schema itself is invalid
    """
    try:
        jsonschema.Draft4Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise SchemaFetchError(f"Invalid schema: {e.message}") from e

    validator = jsonschema.Draft4Validator(
        schema, format_checker=jsonschema.FormatChecker()
    )
    return [format_violation(error) for error in validator.iter_errors(document)]


def validate_schema(document: Any, schema_url: str) -> None:
    """
    Fetch the schema and validate a document against it.

    Raises:
        SchemaFetchError: If the schema cannot be fetched or compiled
        SchemaValidationError: If the document has any violation
    """
    schema = fetch_schema(schema_url)
    violations = validate_document_schema(document, schema)
    if violations:
        logger.debug(f"Schema validation found {len(violations)} violation(s)")
        raise SchemaValidationError(violations)
