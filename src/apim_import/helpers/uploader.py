"""Upload documents to the APImetrics import API."""

import json
from typing import Any

import requests

from ..constants import DEFAULT_ENDPOINT, HTTP_TIMEOUT
from ..exceptions import UploadError
from .logger import get_logger

logger = get_logger("uploader")


def upload_document(document: Any, token: str, endpoint: str = DEFAULT_ENDPOINT) -> str:
    """
    POST a document to the import endpoint.

    Args:
        document: Parsed document, serialised as JSON
        token: Bearer token for the Authorization header
        endpoint: Import endpoint URL

    Returns:
        The response body, unmodified

    Raises:
        UploadError: If the document is not JSON, the request fails or the
            endpoint returns a non-success status
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {token}",
    }

    try:
        body = json.dumps(document, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise UploadError(f"Document cannot be serialised as JSON: {e}") from e

    logger.debug(f"Uploading document to {endpoint}")
    try:
        response = requests.post(
            endpoint, headers=headers, data=body, timeout=HTTP_TIMEOUT
        )
    except (requests.exceptions.RequestException, ConnectionError) as e:
        raise UploadError(f"Upload failed: {e}") from e
    logger.debug(f"Import endpoint returned {response.status_code}")

    if not response.ok:
        raise UploadError(
            f"Upload failed: {response.status_code} {response.reason}\n{response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    return response.text
