"""API integration layer."""

from .client import WebScrapingAPI

__all__ = ["WebScrapingAPI"]
