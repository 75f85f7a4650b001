import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from quickchart.client import QuickChartClient


@pytest.fixture
def make_response():
    """Factory for requests.Response objects with a given status and body."""

    def _make(status_code: int = 200, content: bytes = b"", payload: Optional[Any] = None):
        if payload is not None:
            content = json.dumps(payload).encode("utf-8")
        response = requests.Response()
        response.status_code = status_code
        response._content = content
        return response

    return _make


@pytest.fixture
def mock_session():
    """Mock requests.Session so no test touches the network."""
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def client(mock_session):
    return QuickChartClient(session=mock_session)
