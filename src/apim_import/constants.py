"""Default endpoints and limits."""

DEFAULT_SCHEMA_URL = "https://client.apimetrics.io/api/2/import/schema.json"
DEFAULT_ENDPOINT = "https://client.apimetrics.io/api/2/import"
DEFAULT_YTT_VERSION = "v0.48.0"

YTT_RELEASE_URL = "https://github.com/carvel-dev/ytt/releases/download/{version}/{file_name}"
YTT_BINARY_NAME = "ytt"

# ytt output larger than this is rejected instead of truncated
MAX_OUTPUT_BYTES = 10 * 1024 * 1024

HTTP_TIMEOUT = 60
