"""Core request-building types."""

from .exceptions import InvalidHeaderError, WebScrapingAPIError
from .models import API_KEY_PARAM, DEFAULT_BASE_URL, QUERY_OPTIONS, HttpMethod
from .query_builder import QueryBuilder

__all__ = [
    "QueryBuilder",
    "HttpMethod",
    "API_KEY_PARAM",
    "DEFAULT_BASE_URL",
    "QUERY_OPTIONS",
    "WebScrapingAPIError",
    "InvalidHeaderError",
]
