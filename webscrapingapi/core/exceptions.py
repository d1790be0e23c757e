"""Errors raised locally by the library."""

import re

_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_FIELD_VALUE = re.compile(r"[\t\x20-\x7e]*")


class WebScrapingAPIError(Exception):
    """Base class for library errors."""


class InvalidHeaderError(WebScrapingAPIError, ValueError):
    """A custom header cannot be attached to an HTTP request."""

    def __init__(self, name, value, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid header {name!r}: {reason}")


def check_headers(headers: dict[str, str]) -> dict[str, str]:
    """Validate a header mapping and return a copy of it."""
    checked = {}
    for name, value in headers.items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise InvalidHeaderError(name, value, "names and values must be strings")
        if not _TOKEN.fullmatch(name):
            raise InvalidHeaderError(name, value, "name is not a valid token")
        if not _FIELD_VALUE.fullmatch(value):
            raise InvalidHeaderError(name, value, "value must be visible ASCII, space or tab")
        checked[name] = value
    return checked
