from unittest.mock import MagicMock

import pytest

from helpers import make_response


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get inside Utils.http and record the calls."""
    mock = MagicMock(return_value=make_response(200, b""))
    monkeypatch.setattr("Utils.http.requests.get", mock)
    return mock
