"""Query builder for scraping requests."""

from typing import Any


class QueryBuilder:
    """Accumulates query options, custom headers and a body for one request.

    Every setter stores its value under a fixed option name and returns the
    builder, so calls can be chained::

        builder = QueryBuilder().url("http://httpbin.org/headers").render_js("1")
        builder.headers({"Wsa-test": "abcd"})

    Values are stored as given. The remote API is the only validator of
    option values, including whether ``url`` is present at all.
    """

    def __init__(self):
        """Initialize an empty builder."""
        self._params: dict[str, str] = {}
        self._headers: dict[str, str] = {}
        self._body: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"QueryBuilder(params={self._params!r}, headers={list(self._headers)!r})"

    # Generic access

    def set_param(self, name: str, value: str) -> "QueryBuilder":
        """Set any provider option, including ones without a named setter."""
        self._params[name] = value
        return self

    def get_param(self, name: str) -> str | None:
        """Get any provider option, or None if unset."""
        return self._params.get(name)

    def get_params(self) -> dict[str, str]:
        """Return a copy of the option mapping."""
        return dict(self._params)

    def headers(self, headers: dict[str, str]) -> "QueryBuilder":
        """Replace the custom headers forwarded to the scraped site."""
        self._headers = dict(headers)
        return self

    def get_headers(self) -> dict[str, str]:
        """Return a copy of the custom headers."""
        return dict(self._headers)

    def body(self, body: dict[str, Any]) -> "QueryBuilder":
        """Replace the JSON body sent by POST and PUT requests."""
        self._body = dict(body)
        return self

    def get_body(self) -> dict[str, Any]:
        """Return a copy of the request body."""
        return dict(self._body)

    # Named options

    def url(self, value: str) -> "QueryBuilder":
        """Set the target page to scrape."""
        return self.set_param("url", value)

    def get_url(self) -> str | None:
        return self.get_param("url")

    def render_js(self, value: str) -> "QueryBuilder":
        """Set the JavaScript rendering flag ("1" or "0")."""
        return self.set_param("render_js", value)

    def get_render_js(self) -> str | None:
        return self.get_param("render_js")

    def proxy_type(self, value: str) -> "QueryBuilder":
        """Set the proxy pool ("datacenter" or "residential")."""
        return self.set_param("proxy_type", value)

    def get_proxy_type(self) -> str | None:
        return self.get_param("proxy_type")

    def country(self, value: str) -> "QueryBuilder":
        """Set the proxy country code."""
        return self.set_param("country", value)

    def get_country(self) -> str | None:
        return self.get_param("country")

    def keep_headers(self, value: str) -> "QueryBuilder":
        return self.set_param("keep_headers", value)

    def get_keep_headers(self) -> str | None:
        return self.get_param("keep_headers")

    def session(self, value: str) -> "QueryBuilder":
        """Set the session id used to reuse the same proxy."""
        return self.set_param("session", value)

    def get_session(self) -> str | None:
        return self.get_param("session")

    def timeout(self, value: str) -> "QueryBuilder":
        """Set the remote scraping timeout in milliseconds."""
        return self.set_param("timeout", value)

    def get_timeout(self) -> str | None:
        return self.get_param("timeout")

    def device(self, value: str) -> "QueryBuilder":
        return self.set_param("device", value)

    def get_device(self) -> str | None:
        return self.get_param("device")

    def wait_until(self, value: str) -> "QueryBuilder":
        return self.set_param("wait_until", value)

    def get_wait_until(self) -> str | None:
        return self.get_param("wait_until")

    def wait_for(self, value: str) -> "QueryBuilder":
        return self.set_param("wait_for", value)

    def get_wait_for(self) -> str | None:
        return self.get_param("wait_for")

    def wait_for_css(self, value: str) -> "QueryBuilder":
        return self.set_param("wait_for_css", value)

    def get_wait_for_css(self) -> str | None:
        return self.get_param("wait_for_css")

    def screenshot(self, value: str) -> "QueryBuilder":
        return self.set_param("screenshot", value)

    def get_screenshot(self) -> str | None:
        return self.get_param("screenshot")

    def extract_rules(self, value: str) -> "QueryBuilder":
        """Set the extraction rules as a JSON string."""
        return self.set_param("extract_rules", value)

    def get_extract_rules(self) -> str | None:
        return self.get_param("extract_rules")

    def disable_stealth(self, value: str) -> "QueryBuilder":
        return self.set_param("disable_stealth", value)

    def get_disable_stealth(self) -> str | None:
        return self.get_param("disable_stealth")

    def auto_parser(self, value: str) -> "QueryBuilder":
        return self.set_param("auto_parser", value)

    def get_auto_parser(self) -> str | None:
        return self.get_param("auto_parser")

    def js_instructions(self, value: str) -> "QueryBuilder":
        """Set the browser instructions as a JSON string."""
        return self.set_param("js_instructions", value)

    def get_js_instructions(self) -> str | None:
        return self.get_param("js_instructions")
