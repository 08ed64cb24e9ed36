"""
UI test harness: fixture composition and page objects over Playwright,
plus a small HTTP client for API tests.

Tests request fixtures (``session``, ``authenticated_session``, page
objects) from the pytest plugin in :mod:`harness.plugin`; page objects
talk to the browser only through :class:`~harness.actions.LocatorActions`.
"""

from harness.actions import LocatorActions
from harness.api import ApiClient
from harness.config import Credentials, HarnessConfig, Timeouts, load_config
from harness.engine import FixtureRegistry, FixtureScope
from harness.errors import (
    ApiRequestError,
    ConfigurationError,
    ElementNotActionableError,
    ElementNotFoundError,
    FixtureDefinitionError,
    FixtureLookupError,
    FixtureSetupError,
    HarnessError,
    LocatorError,
    NavigationError,
    WaitTimeoutError,
)

__all__ = [
    "ApiClient",
    "ApiRequestError",
    "ConfigurationError",
    "Credentials",
    "ElementNotActionableError",
    "ElementNotFoundError",
    "FixtureDefinitionError",
    "FixtureLookupError",
    "FixtureRegistry",
    "FixtureScope",
    "FixtureSetupError",
    "HarnessConfig",
    "HarnessError",
    "LocatorActions",
    "LocatorError",
    "NavigationError",
    "Timeouts",
    "WaitTimeoutError",
    "load_config",
]
