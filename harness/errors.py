"""
Exception hierarchy for the UI harness.

Locator-level errors are raised by :mod:`harness.actions` and propagate
unchanged through page objects to the test. Fixture errors are raised by
:mod:`harness.engine`. Driver exceptions are always chained so the
original Playwright message stays in the traceback.
"""

from __future__ import annotations


class HarnessError(Exception):
    """Base class for every error raised by the harness."""


class ConfigurationError(HarnessError):
    """An environment value could not be parsed."""


# -----------------------------------------------------------------------------
# Locator Errors
# -----------------------------------------------------------------------------


class LocatorError(HarnessError):
    """An action on an element query failed."""

    def __init__(self, query: str, message: str):
        super().__init__(f"{message}: {query!r}")
        self.query = query


class ElementNotFoundError(LocatorError):
    """The query matched no element at action time."""

    def __init__(self, query: str):
        super().__init__(query, "No element matches query")


class ElementNotActionableError(LocatorError):
    """The query matched an element that could not be interacted with."""

    def __init__(self, query: str, action: str):
        super().__init__(query, f"Element is not actionable for {action}")
        self.action = action


class WaitTimeoutError(LocatorError):
    """A wait predicate was not met within its budget."""

    def __init__(self, query: str, state: str, timeout: float):
        super().__init__(query, f"State '{state}' not reached within {timeout:g}ms")
        self.state = state
        self.timeout = timeout


class NavigationError(HarnessError):
    """The browser refused or failed a navigation request."""

    def __init__(self, url: str):
        super().__init__(f"Navigation to {url} failed")
        self.url = url


class ApiRequestError(HarnessError):
    """An API call got no HTTP response (connection refused, timeout)."""

    def __init__(self, method: str, url: str):
        super().__init__(f"{method} {url} failed")
        self.method = method
        self.url = url


# -----------------------------------------------------------------------------
# Fixture Errors
# -----------------------------------------------------------------------------


class FixtureDefinitionError(HarnessError):
    """A fixture was registered or written incorrectly."""


class FixtureLookupError(HarnessError):
    """A requested fixture name cannot be resolved."""


class FixtureSetupError(HarnessError):
    """A fixture raised before producing its value."""

    def __init__(self, fixture_name: str, message: str | None = None):
        super().__init__(message or f"Setup of fixture '{fixture_name}' failed")
        self.fixture_name = fixture_name

    @property
    def original(self) -> BaseException | None:
        """The exception raised by the fixture's setup code."""
        return self.__cause__
