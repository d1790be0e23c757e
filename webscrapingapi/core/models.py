"""Core constants and enums for API requests."""

from enum import Enum

API_KEY_PARAM = "api_key"
DEFAULT_BASE_URL = "https://scrape.shifter.io/v1"

# Public list of the provider options QueryBuilder models with a named
# setter and getter. Other options go through set_param or raw calls.
QUERY_OPTIONS = (
    "url",
    "render_js",
    "proxy_type",
    "country",
    "keep_headers",
    "session",
    "timeout",
    "device",
    "wait_until",
    "wait_for",
    "wait_for_css",
    "screenshot",
    "extract_rules",
    "disable_stealth",
    "auto_parser",
    "js_instructions",
)


class HttpMethod(Enum):
    """HTTP methods supported by the scraping endpoint."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"

    @property
    def has_body(self) -> bool:
        """Whether requests with this method carry a JSON body."""
        return self is not HttpMethod.GET
