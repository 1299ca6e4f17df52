"""Action input helpers.

Inputs arrive as ``INPUT_<NAME>`` environment variables, the convention
GitHub Actions uses for ``with:`` parameters.
"""

import os
from typing import Mapping, Optional

from ..exceptions import ConfigurationError

INPUT_PREFIX = "INPUT_"
TRUE_VALUES = ("1", "true", "yes", "on")


def input_key(name: str) -> str:
    """Return the environment key that holds input ``name``."""
    return f"{INPUT_PREFIX}{name.replace(' ', '_').upper()}"


def get_input(
    name: str, required: bool = False, environ: Optional[Mapping[str, str]] = None
) -> str:
    """
    Read an action input.

    Args:
        name: Input name as declared in action.yml
        required: Fail when the input is absent or blank
        environ: Environment mapping to read from (defaults to os.environ)

    Returns:
        The raw input value, or an empty string when absent

    Raises:
        ConfigurationError: If a required input is absent or blank
    """
    if environ is None:
        environ = os.environ

    value = environ.get(input_key(name))
    if required and (not value or value.strip() == ""):
        raise ConfigurationError(f"Missing required input: {name}")
    return value or ""


def parse_boolean(value: str, default: bool) -> bool:
    """Interpret an input string as a boolean, ``default`` when empty."""
    if value == "":
        return default
    return value.lower() in TRUE_VALUES
