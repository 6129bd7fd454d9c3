"""Pytest configuration and shared fixtures for chartgen tests."""

from unittest.mock import Mock

import pytest
import requests

from chartgen.core.pipeline import ChartPipeline
from chartgen.imagegen import ImageGenerationClient


@pytest.fixture
def sales_csv():
    """CSV with a year axis and two numeric series."""
    return "Year,Sales,Profit\n2020,100,50\n2021,150,80"


@pytest.fixture
def products_json():
    """JSON array whose values are numeric-looking strings."""
    return '[{"name":"A","value":"10"},{"name":"B","value":"20"}]'


@pytest.fixture
def region_csv():
    """CSV with a string categorical column."""
    return "Region,Q1,Q2,Q3\nNorth,10,12,14\nSouth,8,9,11\nEast,5,7,6"


@pytest.fixture
def pipeline():
    """Pipeline with memoization enabled and a small cache."""
    return ChartPipeline(cache_enabled=True, max_cache_entries=2)


@pytest.fixture
def mock_session():
    """Mock requests session for the image client."""
    return Mock()


@pytest.fixture
def image_client(mock_session):
    """Image client wired to the mock session."""
    return ImageGenerationClient(
        api_key="test-key",
        base_url="https://example.test/v1beta",
        primary_model="primary-model",
        fallback_model="fallback-model",
        timeout_seconds=5,
        session=mock_session,
    )


@pytest.fixture
def make_response():
    """Build mock requests.Response objects."""

    def _make(payload=None, status_code=200):
        response = Mock()
        response.status_code = status_code
        response.ok = status_code < 400
        response.text = str(payload)
        response.json.return_value = payload or {}
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Error"
            )
        else:
            response.raise_for_status.return_value = None
        return response

    return _make


# Test markers for different test categories
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise the HTTP surface end to end"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "web" in item.path.parts:
            item.add_marker(pytest.mark.integration)

        if not any(marker.name == "integration" for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
