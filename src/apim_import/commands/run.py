"""Run command implementation."""

from ..exceptions import ImportActionError
from ..helpers.error_handler import handle_error, handle_success
from ..pipeline import ActionConfig, run_pipeline


def run_command() -> None:
    """Run the import pipeline from ``INPUT_*`` environment variables."""
    try:
        config = ActionConfig.from_env()
        result_text = run_pipeline(config)
    except ImportActionError as e:
        handle_error(str(e))
        return

    if result_text and result_text.strip() != "":
        handle_success(result_text.strip())
    else:
        handle_success("Upload complete.")
