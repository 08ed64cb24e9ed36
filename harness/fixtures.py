"""
Canonical browser and API fixtures.

Registered on :data:`registry`. Scopes opened from it provide ``config``
(a :class:`~harness.config.HarnessConfig`) and, for the browser chain,
``browser`` (a Playwright ``Browser``). They may also provide
``new_context``, a context factory such as pytest-playwright's; without
one, contexts come straight from ``browser.new_context``. The dependency
chain is::

    browser -> new_context
    new_context, config -> browser_context -> session -> actions -> authenticated_session
    config -> api_client
"""

from __future__ import annotations

import logging

from harness.actions import LocatorActions
from harness.api import ApiClient
from harness.engine import FixtureRegistry
from harness.pages.dashboard_page import DashboardPage
from harness.pages.login_page import LoginPage

logger = logging.getLogger(__name__)

registry = FixtureRegistry()


@registry.fixture
def new_context(browser):
    return browser.new_context


@registry.fixture
def browser_context(new_context, config):
    """Fresh browser context; cookies and storage are never shared between tests."""
    context = new_context(**config.context_options())
    if config.debug:
        context.on("request", lambda request: logger.debug("Request: %s", request.url))
        context.on(
            "response",
            lambda response: logger.debug("Response: %s %s", response.url, response.status),
        )
    yield context
    context.close()


@registry.fixture
def session(browser_context, config):
    """A new page (tab) in the test's browser context."""
    page = browser_context.new_page()
    page.set_default_timeout(config.timeouts.medium)
    yield page
    page.close()


@registry.fixture
def actions(session, config):
    return LocatorActions.from_config(session, config)


@registry.fixture
def authenticated_session(session, actions, config):
    """
    The test's session, logged in as the configured test user.

    The page is on the dashboard with its main content visible when the
    fixture hands it over. Closing is left to ``session``.
    """
    login_page = LoginPage(actions)
    login_page.navigate_to_login()
    login_page.login(config.user.email, config.user.password)

    DashboardPage(actions).wait_for_main_content(timeout=config.timeouts.long)
    logger.info("Logged in as %s", config.user.email)
    return session


@registry.fixture
def api_client(config):
    """HTTP client for ``config.api_base_url``; needs no browser."""
    client = ApiClient.from_config(config)
    yield client
    client.close()
