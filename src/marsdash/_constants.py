"""Internal constants shared across the library."""

BASE_URL = "http://localhost:3000"
USER_AGENT = "marsdash/0 (+aiohttp)"
DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_IMAGE_DIR = "images"

# ------------------------------------------------------------------
# Proxy endpoints
# ------------------------------------------------------------------

ROVERS_ENDPOINT = "/rovers"
ROVER_ENDPOINT = "/rovers/{name}"
LATEST_PHOTOS_ENDPOINT = "/rovers/{name}/latestphotos"
