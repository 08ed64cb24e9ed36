"""
HTTP client for API-level tests.

A thin wrapper around :class:`requests.Session` that joins paths onto the
configured ``API_BASE_URL``, applies a default timeout and remembers every
response it received. The pytest plugin attaches those exchanges to the
report of a failing test that used ``api_client``, so assertions on status
codes come with the request and response that produced them.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from harness.config import HarnessConfig
from harness.errors import ApiRequestError

logger = logging.getLogger(__name__)

# Bodies longer than this are cut in failure reports.
MAX_LOGGED_BODY = 2000


class ApiClient:
    """
    Client for the API under test.

    Args:
        base_url: Prefix for every request path (e.g. ``http://localhost:8080/api``).
        timeout: Default per-request timeout in seconds.
        session: Optional pre-built :class:`requests.Session`.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = session or requests.Session()
        self.http.headers.setdefault("Accept", "application/json")
        self.exchanges: list[requests.Response] = []

    @classmethod
    def from_config(cls, config: HarnessConfig) -> ApiClient:
        return cls(config.api_base_url, timeout=config.timeouts.medium / 1000)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """
        Send a request and record the response.

        Any HTTP status is returned as-is; only the absence of a response
        raises.

        Raises:
            ApiRequestError: The request could not be completed.
        """
        url = self.url(path)
        kwargs.setdefault("timeout", self.timeout)
        logger.debug("%s %s", method, url)
        try:
            response = self.http.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise ApiRequestError(method, url) from exc
        self.exchanges.append(response)
        return response

    def get(self, path: str, **kwargs: Any) -> requests.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> requests.Response:
        return self.request("POST", path, **kwargs)

    def format_exchanges(self) -> str:
        """Every recorded request with the response it got, oldest first."""
        blocks = []
        for response in self.exchanges:
            sent = response.request
            blocks.append(
                f"Request: {sent.method} {sent.url}\n{_body(sent.body)}\n"
                f"Response: {response.status_code}\n{_body(response.text)}"
            )
        return "\n\n".join(blocks)

    def close(self) -> None:
        self.http.close()


def _body(body: str | bytes | None) -> str:
    if not body:
        return "<empty>"
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if len(body) > MAX_LOGGED_BODY:
        return f"{body[:MAX_LOGGED_BODY]}... ({len(body)} chars)"
    return body
