"""Action configuration snapshot."""

from dataclasses import dataclass
from typing import Mapping, Optional

from ..constants import DEFAULT_ENDPOINT, DEFAULT_SCHEMA_URL, DEFAULT_YTT_VERSION
from ..helpers.inputs import get_input, parse_boolean


@dataclass
class ActionConfig:
    """Inputs for one pipeline run, read once at startup."""

    token: str
    file: str = ""
    template: str = ""
    template_values: str = ""
    validate_schema: bool = True
    schema_url: str = DEFAULT_SCHEMA_URL
    endpoint: str = DEFAULT_ENDPOINT
    ytt_version: str = DEFAULT_YTT_VERSION
    ytt_args: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ActionConfig":
        """Build the configuration from ``INPUT_*`` variables.

        Raises:
            ConfigurationError: If the token input is missing
        """
        return cls(
            file=get_input("file", environ=environ),
            template=get_input("template", environ=environ),
            template_values=get_input("template_values", environ=environ),
            token=get_input("token", required=True, environ=environ),
            validate_schema=parse_boolean(
                get_input("validate_schema", environ=environ), True
            ),
            schema_url=get_input("schema_url", environ=environ) or DEFAULT_SCHEMA_URL,
            endpoint=get_input("endpoint", environ=environ) or DEFAULT_ENDPOINT,
            ytt_version=get_input("ytt_version", environ=environ)
            or DEFAULT_YTT_VERSION,
            ytt_args=get_input("ytt_args", environ=environ),
        )

    def describe(self) -> dict:
        """Return the configuration for logging, with the token masked."""
        return {
            "file": self.file,
            "template": self.template,
            "template_values": self.template_values,
            "token": "***",
            "validate_schema": self.validate_schema,
            "schema_url": self.schema_url,
            "endpoint": self.endpoint,
            "ytt_version": self.ytt_version,
            "ytt_args": self.ytt_args,
        }
