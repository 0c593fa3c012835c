"""Shared fixtures for the SDK test suite."""

from __future__ import annotations

from datetime import datetime
from unittest.mock import MagicMock

import pytest
import requests

from auropay_sdk import CallbackParameters, Customer

FIXED_NOW = datetime(2030, 6, 15, 12, 0, 0)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def customer() -> Customer:
    return Customer("Asha", "Rao", "9876543210", "asha.rao@example.com")


@pytest.fixture
def callback_parameters() -> CallbackParameters:
    return CallbackParameters("https://merchant.example.com/callback", "INV0001")


def _make_response(status_code: int = 200, body=None, text: str = "") -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def session() -> MagicMock:
    mock_session = MagicMock(spec=requests.Session)
    mock_session.request.return_value = _make_response(200, {"id": "link-1"})
    return mock_session
