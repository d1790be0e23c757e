"""Pytest configuration and fixtures."""

import shutil
import tempfile
from pathlib import Path

import pytest

from webscrapingapi.config.settings import APIConfig
from webscrapingapi.core.query_builder import QueryBuilder


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def api_key():
    """API key used by test clients."""
    return "TESTKEY"


@pytest.fixture
def test_config():
    """Create a test transport configuration."""
    return APIConfig(base_url="https://scrape.example.test/v1", timeout=5)


@pytest.fixture
def sample_query_builder():
    """Builder matching the documented httpbin example."""
    builder = QueryBuilder()
    builder.url("http://httpbin.org/headers")
    builder.render_js("1")
    builder.headers({"Wsa-test": "abcd"})
    return builder
