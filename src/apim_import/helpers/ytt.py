"""ytt helper functions: download the binary and render templates."""

import os
import platform
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from typing import List, Optional

import requests

from ..constants import (
    DEFAULT_YTT_VERSION,
    HTTP_TIMEOUT,
    MAX_OUTPUT_BYTES,
    YTT_BINARY_NAME,
    YTT_RELEASE_URL,
)
from ..exceptions import DownloadError, RenderError, UnsupportedPlatformError
from .error_handler import handle_info
from .logger import get_logger

logger = get_logger("ytt")

OS_NAMES = {
    "darwin": "darwin",
    "linux": "linux",
}

ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "arm64": "arm64",
    "aarch64": "arm64",
}


@dataclass
class YttAsset:
    """A ytt release asset for one platform."""

    url: str
    file_name: str


def resolve_ytt_asset(
    version: str, system: Optional[str] = None, machine: Optional[str] = None
) -> YttAsset:
    """
    Resolve the ytt release asset for a platform.

    Args:
        version: ytt release tag, e.g. v0.48.0
        system: OS name (defaults to platform.system())
        machine: CPU architecture (defaults to platform.machine())

    Returns:
        YttAsset with download URL and file name

    Raises:
        UnsupportedPlatformError: If no asset exists for the OS or architecture
    """
    if system is None:
        system = platform.system()
    if machine is None:
        machine = platform.machine()

    os_name = OS_NAMES.get(system.lower())
    if os_name is None:
        raise UnsupportedPlatformError(f"Unsupported OS for ytt: {system}")

    arch_name = ARCH_NAMES.get(machine.lower())
    if arch_name is None:
        raise UnsupportedPlatformError(f"Unsupported architecture for ytt: {machine}")

    file_name = f"ytt-{os_name}-{arch_name}"
    url = YTT_RELEASE_URL.format(version=version, file_name=file_name)
    return YttAsset(url=url, file_name=file_name)


def ensure_ytt(version: str = DEFAULT_YTT_VERSION) -> str:
    """
    Return a path to a ytt binary, downloading it when needed.

    A ``ytt`` file in the working directory is used as-is, whatever its
    version. Otherwise the release asset for ``version`` is downloaded into
    a fresh temporary directory.

    Raises:
        UnsupportedPlatformError: If no asset exists for this platform
        DownloadError: If the release download fails
    """
    if os.path.exists(YTT_BINARY_NAME):
        local_path = os.path.abspath(YTT_BINARY_NAME)
        logger.debug(f"Using local ytt binary: {local_path}")
        return local_path

    asset = resolve_ytt_asset(version)
    download_dir = tempfile.mkdtemp(prefix="apim-ytt-")
    target_path = os.path.join(download_dir, asset.file_name)

    logger.info(f"Downloading ytt {version} from {asset.url}")
    try:
        response = requests.get(asset.url, timeout=HTTP_TIMEOUT)
    except (requests.exceptions.RequestException, ConnectionError) as e:
        raise DownloadError(f"Failed to download ytt: {e}") from e

    if not response.ok:
        raise DownloadError(
            f"Failed to download ytt: {response.status_code} {response.reason}"
        )

    with open(target_path, "wb") as f:
        f.write(response.content)
    os.chmod(target_path, 0o755)

    return target_path


def build_ytt_args(
    template_path: str, values_path: str = "", ytt_args: str = ""
) -> List[str]:
    """Build the ytt argument list for a template and optional values file."""
    args = ["-f", template_path]

    if values_path:
        args.extend(["-f", values_path])

    if ytt_args:
        args.extend(item for item in ytt_args.split(" ") if item.strip() != "")

    return args


def render_with_ytt(
    template_path: str,
    values_path: str = "",
    ytt_args: str = "",
    ytt_version: str = DEFAULT_YTT_VERSION,
) -> str:
    """
    Render a template with ytt and return its standard output.

    Args:
        template_path: Template file or directory passed with -f
        values_path: Optional values file passed with a second -f
        ytt_args: Extra arguments, separated by single spaces
        ytt_version: Release to download when ytt is not present locally

    Returns:
        The rendered document, exactly as ytt wrote it

    Raises:
        RenderError: If ytt cannot start, fails, or exceeds the output limit
    """
    ytt_bin = ensure_ytt(ytt_version)
    args = build_ytt_args(template_path, values_path, ytt_args)
    logger.debug(f"Running {ytt_bin} {' '.join(args)}")

    try:
        try:
            result = subprocess.run(
                [ytt_bin] + args,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise RenderError(f"Failed to run ytt: {e}") from e

        if (
            len(result.stdout.encode("utf-8")) > MAX_OUTPUT_BYTES
            or len(result.stderr.encode("utf-8")) > MAX_OUTPUT_BYTES
        ):
            raise RenderError(
                f"ytt output exceeded the {MAX_OUTPUT_BYTES} byte limit"
            )

        if result.returncode != 0:
            detail = result.stderr.strip() or result.stdout.strip()
            if not detail:
                detail = f"ytt exited with status {result.returncode}"
            raise RenderError(detail)

        if result.stderr and result.stderr.strip() != "":
            handle_info(result.stderr.strip())

        return result.stdout
    finally:
        _cleanup_download(ytt_bin)


def _cleanup_download(ytt_bin: str) -> None:
    """Remove a ytt binary that was downloaded into a temporary directory."""
    if ytt_bin == os.path.abspath(YTT_BINARY_NAME):
        return
    download_dir = os.path.dirname(ytt_bin)
    if os.path.basename(download_dir).startswith("apim-ytt-"):
        shutil.rmtree(download_dir, ignore_errors=True)
