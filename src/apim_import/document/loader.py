"""JSON/YAML document loading with format autodetection."""

import json
from dataclasses import dataclass
from typing import Any

import yaml

from ..exceptions import ParseError
from ..helpers.logger import get_logger

logger = get_logger("loader")

FORMAT_JSON = "json"
FORMAT_YAML = "yaml"


class JsonCompatibleLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain strings.

    The loaded tree is always serialisable with ``json.dumps``.
    """

    pass


JsonCompatibleLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass
class LoadedDocument:
    """A parsed document and the format it was read from."""

    data: Any
    format: str


def detect_format(raw: str, source_hint: str = "") -> str:
    """
    Guess the document format.

    A ``.json`` hint or text starting with ``{`` means JSON, everything else
    is YAML. YAML flow mappings that start with ``{`` are therefore read as
    JSON.
    """
    if (source_hint and source_hint.endswith(".json")) or raw.strip().startswith(
        "{"
    ):
        return FORMAT_JSON
    return FORMAT_YAML


def load_document(raw: str, source_hint: str = "") -> LoadedDocument:
    """
    Parse raw document text as JSON or YAML.

    Args:
        raw: Document text
        source_hint: File or template path the text came from

    Returns:
        LoadedDocument with the parsed data and detected format

    Raises:
        ParseError: If the text is not valid in the detected format, or
            holds values with no JSON form
    """
    doc_format = detect_format(raw, source_hint)
    logger.debug(f"Parsing {source_hint or 'document'} as {doc_format}")

    if doc_format == FORMAT_JSON:
        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise ParseError(
                f"Invalid JSON: {e.msg} at line {e.lineno} column {e.colno}"
            ) from e
        return LoadedDocument(data=data, format=FORMAT_JSON)

    try:
        data = yaml.load(raw, Loader=JsonCompatibleLoader)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML: {e}") from e

    # binary, sets and .nan/.inf load fine but have no JSON form
    try:
        json.dumps(data, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ParseError(f"YAML document cannot be represented as JSON: {e}") from e
    return LoadedDocument(data=data, format=FORMAT_YAML)


def _reject_constant(name: str):
    raise ParseError(f"Invalid JSON: {name} is not allowed")
