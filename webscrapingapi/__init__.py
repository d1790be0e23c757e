"""WebScrapingAPI - async client for the WebScrapingAPI scraping service."""

__version__ = "0.1.0"

from .api import WebScrapingAPI
from .config import APIConfig, ClientSettings
from .core import InvalidHeaderError, QueryBuilder, WebScrapingAPIError

__all__ = [
    "WebScrapingAPI",
    "QueryBuilder",
    "APIConfig",
    "ClientSettings",
    "WebScrapingAPIError",
    "InvalidHeaderError",
    "__version__",
]
