"""Shared fixtures: a mocked requests session and run settings."""

from unittest.mock import MagicMock

import pytest
import requests

from tower_launcher.client import TowerClient
from tower_launcher.config import Settings
from tower_launcher.request import RequestContext

BASE_URL = "https://tower.example.com"

_NO_JSON = object()


def make_response(json_data=_NO_JSON, text="", status_code=200):
    """Fake requests.Response. Without json_data, .json() raises like a text body."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if json_data is _NO_JSON:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = json_data
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error", response=resp
        )
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def ctx(session):
    return RequestContext(
        client=TowerClient(session, BASE_URL),
        template_id="42",
        extra_vars={"scm_branch": "main", "extra_vars": {"env": "dev"}},
    )


@pytest.fixture
def settings():
    return Settings(
        url=BASE_URL,
        username="admin",
        password="s3cret",
        template_id="42",
        scm_branch="main",
        additional_vars='{"env": "dev"}',
        poll_interval=10,
    )
