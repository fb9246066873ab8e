"""Shared fixtures for wikilookup tests.

HTTP is mocked at the client's session, so no test touches the network and
every test can inspect the captured request URL and parameters.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from wikilookup import lookups
from wikilookup.api_client import LookupClient
from wikilookup.config import CONFIG_ENV_VAR, config


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    """Run every test against the built-in configuration."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    config.reset()
    yield config
    config.reset()


@pytest.fixture(autouse=True)
def no_default_client(monkeypatch):
    """Fail loudly if a test forgets to pass its mocked client."""

    def _refuse():
        raise AssertionError("test reached the shared network client")

    monkeypatch.setattr(lookups, "get_default_client", _refuse)


@pytest.fixture
def make_response():
    """Factory for mocked requests responses."""

    def _make(body="", status_code=200):
        response = Mock()
        response.status_code = status_code
        if isinstance(body, (dict, list)):
            text = json.dumps(body)
            response.json.return_value = body
        else:
            text = body
            response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text
        response.content = text.encode("utf-8")
        response.headers = {}
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
        return response

    return _make


@pytest.fixture
def raw_response():
    """Factory for real requests.Response objects carrying raw bytes and headers."""

    def _make(content: bytes, content_type: str, status_code=200):
        response = requests.Response()
        response.status_code = status_code
        response._content = content
        response.headers["Content-Type"] = content_type
        return response

    return _make


@pytest.fixture
def session():
    """Mock session standing in for requests.Session."""
    mock_session = Mock()
    mock_session.headers = {}
    return mock_session


@pytest.fixture
def client(session):
    """LookupClient wired to the mock session."""
    return LookupClient(session=session)


def backlinks_xml(*titles):
    items = "".join(f'<bl pageid="{i}" ns="0" title="{t}" />' for i, t in enumerate(titles))
    return (
        '<?xml version="1.0"?><api batchcomplete="">'
        f"<query><backlinks>{items}</backlinks></query></api>"
    )


@pytest.fixture
def backlinks():
    """Factory for list=backlinks XML bodies."""
    return backlinks_xml
