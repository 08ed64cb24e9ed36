"""
pytest plugin exposing the harness fixtures.

Each test gets its own :class:`~harness.engine.FixtureScope`; the pytest
fixtures below only ask that scope for values, so setup order, caching
and reverse-order teardown are all handled by the engine. The
``browser`` fixture comes from pytest-playwright, and contexts are
created through its ``new_context`` factory so ``--video``,
``--tracing`` and ``--screenshot`` apply to harness sessions.

Key Concepts Demonstrated:
- One fixture scope per test invocation (test isolation)
- Page object fixtures built on the scope's session
- Screenshot capture on failure
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from harness.actions import LocatorActions
from harness.api import ApiClient
from harness.config import HarnessConfig, load_config
from harness.engine import FixtureScope
from harness.errors import ConfigurationError
from harness.fixtures import registry
from harness.helpers import save_failure_screenshot
from harness.pages import DashboardPage, LoginPage, UserProfilePage


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: browser scenario against a running application")
    config.addinivalue_line("markers", "api: HTTP-level test against the API under test")
    apply_launch_settings(config)


def apply_launch_settings(config) -> None:
    """
    Hand HEADLESS / SLOW_MO to pytest-playwright's launch options.

    Explicit ``--headed`` / ``--slowmo`` flags keep precedence.
    """
    try:
        launch = load_config().launch_options()
    except ConfigurationError as exc:
        raise pytest.UsageError(str(exc)) from exc

    if not launch["headless"]:
        config.option.headed = True
    if launch["slow_mo"] and not config.getoption("--slowmo"):
        config.option.slowmo = launch["slow_mo"]


def context_factory(
    new_context: Callable[..., BrowserContext], browser_context_args: dict[str, Any]
) -> Callable[..., BrowserContext]:
    """
    Wrap pytest-playwright's ``new_context`` for the harness.

    ``new_context`` already passes ``browser_context_args`` (``--base-url``,
    ``--device``, video directory); options repeated in both are dropped
    from the harness side.
    """

    def create(**options: Any) -> BrowserContext:
        return new_context(
            **{key: value for key, value in options.items() if key not in browser_context_args}
        )

    return create


# -----------------------------------------------------------------------------
# Engine Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture(scope="session")
def harness_config() -> HarnessConfig:
    """Configuration loaded once from the environment."""
    return load_config()


@pytest.fixture
def fixture_scope(
    browser: Browser,
    new_context: Callable[..., BrowserContext],
    browser_context_args: dict[str, Any],
    harness_config: HarnessConfig,
) -> Generator[FixtureScope, None, None]:
    """
    Open a fixture scope for the current test.

    Everything requested from the scope is torn down, in reverse setup
    order, when the test finishes, whatever its outcome.
    """
    with registry.scope(
        browser=browser,
        new_context=context_factory(new_context, browser_context_args),
        config=harness_config,
    ) as scope:
        yield scope


@pytest.fixture
def browser_context(fixture_scope: FixtureScope) -> BrowserContext:
    return fixture_scope.request("browser_context")


@pytest.fixture
def session(fixture_scope: FixtureScope) -> Page:
    return fixture_scope.request("session")


@pytest.fixture
def actions(fixture_scope: FixtureScope) -> LocatorActions:
    return fixture_scope.request("actions")


@pytest.fixture
def authenticated_session(fixture_scope: FixtureScope) -> Page:
    """Session logged in as the configured test user, sitting on the dashboard."""
    return fixture_scope.request("authenticated_session")


@pytest.fixture
def api_client(harness_config: HarnessConfig) -> Generator[ApiClient, None, None]:
    """
    HTTP client for ``API_BASE_URL``.

    Opens its own scope so API tests never launch a browser. Recorded
    requests and responses are logged if the test fails.
    """
    with registry.scope(config=harness_config) as scope:
        yield scope.request("api_client")


# -----------------------------------------------------------------------------
# Page Object Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def login_page(actions: LocatorActions) -> LoginPage:
    """LoginPage bound to the test's session (not yet navigated)."""
    return LoginPage(actions)


@pytest.fixture
def dashboard_page(actions: LocatorActions) -> DashboardPage:
    return DashboardPage(actions)


@pytest.fixture
def profile_page(actions: LocatorActions) -> UserProfilePage:
    return UserProfilePage(actions)


# -----------------------------------------------------------------------------
# Failure Artifacts
# -----------------------------------------------------------------------------


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Attach failure artifacts when the test body fails.

    Saves a screenshot of the harness session and adds the API exchanges of
    ``api_client`` as a report section.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        scope = item.funcargs.get("fixture_scope")
        page = scope.peek("session") if scope else None
        if page is not None and not page.is_closed():
            try:
                path = save_failure_screenshot(page, item.name)
                print(f"\nScreenshot saved: {path}")
            except Exception as exc:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {exc}")

        client = item.funcargs.get("api_client")
        if client is not None and client.exchanges:
            report.sections.append(("API exchanges", client.format_exchanges()))
