"""
Authenticated HTTP access to the Tower/AWX REST API.

TLS verification is off for every request: the action targets internal
Tower instances with self-signed certificates.
"""
from typing import Any, Optional

import requests
import urllib3

# Disable SSL warnings, every request below uses verify=False
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


def build_session(username: str, password: str) -> requests.Session:
    """Return a session that sends basic auth credentials on every request."""
    session = requests.Session()
    session.auth = (username, password)
    session.headers.update({"Content-Type": "application/json"})
    return session


class TowerClient:
    """A requests session bound to one Tower/AWX base URL."""

    def __init__(self, session: requests.Session, base_url: str):
        self.session = session
        self.base_url = base_url.rstrip("/")

    def url_for(self, endpoint: str) -> str:
        """Resolve an API path, a server-relative URL or an absolute URL."""
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    @staticmethod
    def _json_or_none(resp: requests.Response) -> Optional[Any]:
        try:
            return resp.json()
        except ValueError:
            return None

    def get_json(self, endpoint: str) -> Optional[Any]:
        resp = self.session.get(self.url_for(endpoint), verify=False)
        return self._json_or_none(resp)

    def post_json(self, endpoint: str, payload: dict) -> Optional[Any]:
        resp = self.session.post(self.url_for(endpoint), json=payload, verify=False)
        return self._json_or_none(resp)

    def get_text(self, endpoint: str, params: Optional[dict] = None) -> str:
        """GET a plain text body, raising on HTTP errors."""
        resp = self.session.get(self.url_for(endpoint), params=params, verify=False)
        resp.raise_for_status()
        return resp.text
