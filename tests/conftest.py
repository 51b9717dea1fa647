"""Pytest configuration and fixtures for Zermelo client tests."""
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from zermelo.http import HttpResponse


@pytest.fixture
def mock_access_token() -> str:
    """Return a mock Zermelo access token."""
    return "test_access_token_123"


@pytest.fixture
def example_appointments_payload() -> dict[str, Any]:
    """Return the example schedule from the Zermelo API documentation."""
    return {
        "response": {
            "status": 200,
            "message": "",
            "startRow": 0,
            "endRow": 27,
            "totalRows": 27,
            "data": [
                {
                    "id": 5,
                    "start": 42364236,
                    "end": 436234523,
                    "startTimeSlot": 1,
                    "endTimeSlot": 1,
                    "subjects": ["ne"],
                    "teachers": ["KRO"],
                    "groups": ["v1a"],
                    "locations": ["M92"],
                    "type": "lesson",
                    "remark": "Take care to bring your books",
                    "valid": True,
                    "cancelled": False,
                    "modified": True,
                    "moved": False,
                    "new": False,
                    "changeDescription": "The location has been changed from M13 to M92",
                }
            ],
        }
    }


@pytest.fixture
def make_http_client() -> Callable[..., MagicMock]:
    """Return a factory for HttpClient stand-ins answering with the given responses."""

    def _make(*responses: HttpResponse) -> MagicMock:
        http_client = MagicMock()
        http_client.request.side_effect = list(responses)
        return http_client

    return _make
