"""
Harness configuration module.

All environment-sourced settings are read in one place by
:func:`load_config`. Every value has a documented default so a bare
checkout runs against a local application without extra setup:

    BASE_URL              http://localhost:3000
    API_BASE_URL          http://localhost:8080/api
    TEST_USER_EMAIL       testuser@example.com
    TEST_USER_PASSWORD    TestPassword123!
    TEST_ADMIN_EMAIL      admin@example.com
    TEST_ADMIN_PASSWORD   AdminPassword123!
    HEADLESS              true (only the literal "false" disables it)
    SLOW_MO               0 milliseconds
    DEBUG                 false (only the literal "true" enables it)
    TIMEOUT_SHORT         3000 milliseconds
    TIMEOUT_MEDIUM        5000 milliseconds
    TIMEOUT_LONG          10000 milliseconds
    TIMEOUT_EXTRA_LONG    15000 milliseconds
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from harness.errors import ConfigurationError

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_API_BASE_URL = "http://localhost:8080/api"


@dataclass(frozen=True)
class Credentials:
    """Email/password pair handed to the login page."""

    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


@dataclass(frozen=True)
class Timeouts:
    """Wait budgets in milliseconds."""

    short: int = 3000
    medium: int = 5000
    long: int = 10000
    extra_long: int = 15000


@dataclass(frozen=True)
class HarnessConfig:
    """Immutable settings shared by fixtures and page objects."""

    base_url: str = DEFAULT_BASE_URL
    api_base_url: str = DEFAULT_API_BASE_URL
    user: Credentials = Credentials("testuser@example.com", "TestPassword123!")
    admin: Credentials = Credentials("admin@example.com", "AdminPassword123!")
    headless: bool = True
    slow_mo: int = 0
    debug: bool = False
    timeouts: Timeouts = field(default_factory=Timeouts)

    # Browser context settings; fixed once the context is created.
    viewport: dict[str, int] = field(
        default_factory=lambda: {"width": 1280, "height": 720}
    )
    locale: str = "en-US"
    timezone_id: str = "America/New_York"
    ignore_https_errors: bool = True

    def context_options(self) -> dict[str, Any]:
        """Keyword arguments for ``Browser.new_context``."""
        return {
            "base_url": self.base_url,
            "viewport": dict(self.viewport),
            "locale": self.locale,
            "timezone_id": self.timezone_id,
            "ignore_https_errors": self.ignore_https_errors,
        }

    def launch_options(self) -> dict[str, Any]:
        """Keyword arguments for ``BrowserType.launch``."""
        return {"headless": self.headless, "slow_mo": self.slow_mo}


# Sample profile records for form scenarios.
TEST_DATA: dict[str, dict[str, str]] = {
    "valid_user": {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "phone": "+1234567890",
    },
    "invalid_user": {
        "first_name": "",
        "last_name": "",
        "email": "invalid-email",
        "phone": "",
    },
}


def _int_setting(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{key} must not be negative, got {value}")
    return value


def load_config(environ: Mapping[str, str] | None = None) -> HarnessConfig:
    """
    Build the harness configuration from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        A frozen :class:`HarnessConfig`.

    Raises:
        ConfigurationError: A numeric setting is not a non-negative integer.
    """
    if environ is None:
        environ = os.environ

    defaults = Timeouts()
    timeouts = Timeouts(
        short=_int_setting(environ, "TIMEOUT_SHORT", defaults.short),
        medium=_int_setting(environ, "TIMEOUT_MEDIUM", defaults.medium),
        long=_int_setting(environ, "TIMEOUT_LONG", defaults.long),
        extra_long=_int_setting(environ, "TIMEOUT_EXTRA_LONG", defaults.extra_long),
    )

    return HarnessConfig(
        base_url=environ.get("BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        api_base_url=environ.get("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        user=Credentials(
            email=environ.get("TEST_USER_EMAIL", "testuser@example.com"),
            password=environ.get("TEST_USER_PASSWORD", "TestPassword123!"),
        ),
        admin=Credentials(
            email=environ.get("TEST_ADMIN_EMAIL", "admin@example.com"),
            password=environ.get("TEST_ADMIN_PASSWORD", "AdminPassword123!"),
        ),
        headless=environ.get("HEADLESS", "true").lower() != "false",
        slow_mo=_int_setting(environ, "SLOW_MO", 0),
        debug=environ.get("DEBUG", "false").lower() == "true",
        timeouts=timeouts,
    )
