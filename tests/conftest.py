"""
Shared pytest fixtures for the harness test suite.

The harness's own fixtures (``session``, ``authenticated_session``, the
page objects) come from the ``harness.plugin`` pytest plugin. This
module points them at the application under test: either an external
stack given by ``BASE_URL`` or the demo Flask app started in a
background thread.

Key Concepts Demonstrated:
- Live server fixture for Playwright
- Overriding plugin fixtures from conftest
"""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Generator
from dataclasses import replace

import pytest
import requests

from harness.config import HarnessConfig, load_config


def _wait_for_healthy(url: str, timeout: int = 30, interval: float = 0.2) -> None:
    """Poll the demo app health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            response = requests.get(f"{url}/api/health", timeout=2)
            if response.status_code == 200:
                return
        except requests.RequestException:
            pass
        time.sleep(interval)
    raise RuntimeError(f"Demo app at {url} not healthy after {timeout}s")


@pytest.fixture(scope="session")
def live_server() -> Generator[str, None, None]:
    """
    Return the base URL of the application under test.

    If BASE_URL is set, that application is used as-is.
    Otherwise the demo app is served from a daemon thread.
    """
    provided_base_url = os.getenv("BASE_URL")
    if provided_base_url:
        yield provided_base_url.rstrip("/")
        return

    from tests.demo_app import create_app

    app = create_app()
    host = "127.0.0.1"
    port = int(os.getenv("DEMO_APP_PORT", "5001"))

    server_thread = threading.Thread(
        target=lambda: app.run(host=host, port=port, use_reloader=False, threaded=True)
    )
    server_thread.daemon = True
    server_thread.start()

    base_url = f"http://{host}:{port}"
    _wait_for_healthy(base_url)
    yield base_url

    # Server stops when the test session ends (daemon thread)


@pytest.fixture(scope="session")
def harness_config(live_server: str) -> HarnessConfig:
    """
    Harness configuration aimed at the live server.

    The API is expected under ``/api`` of the same server unless
    API_BASE_URL is set.
    """
    config = replace(load_config(), base_url=live_server)
    if os.getenv("API_BASE_URL"):
        return config
    return replace(config, api_base_url=f"{live_server}/api")

