"""
Dashboard Page Object.

This page object encapsulates the landing view shown after login:
the greeting, the navigation bar and sidebar, and the links to the
profile, settings and logout actions.
"""

from __future__ import annotations

from harness.actions import LocatorActions
from harness.pages import paths


class DashboardPage:
    """
    Page object for the dashboard.

    Provides methods for:
    - Reading the greeting and welcome message
    - Checking layout regions
    - Navigating to profile and settings
    - Logging out
    """

    URL_PATH = paths.DASHBOARD

    USER_GREETING = '[data-testid="user-greeting"]'
    LOGOUT_BUTTON = 'button:has-text("Logout")'
    PROFILE_LINK = f'a[href="{paths.PROFILE}"]'
    SETTINGS_LINK = f'a[href="{paths.SETTINGS}"]'
    MAIN_CONTENT = '[data-testid="main-content"]'
    NAVBAR = '[data-testid="navbar"]'
    SIDEBAR = '[data-testid="sidebar"]'
    WELCOME_MESSAGE = '[data-testid="welcome-message"]'

    def __init__(self, actions: LocatorActions):
        """
        Initialize DashboardPage.

        Args:
            actions: Locator actions bound to the browser page.
        """
        self.actions = actions

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate_to_dashboard(self) -> "DashboardPage":
        """
        Navigate to the dashboard and wait for it to settle.

        Returns:
            Self for method chaining.
        """
        self.actions.navigate(self.URL_PATH)
        self.actions.wait_for_settle()
        return self

    def click_logout(self) -> None:
        """Log out and wait for the login page to load."""
        self.actions.click(self.LOGOUT_BUTTON)
        self.actions.wait_for_settle()

    def click_profile(self) -> None:
        self.actions.click(self.PROFILE_LINK)

    def click_settings(self) -> None:
        self.actions.click(self.SETTINGS_LINK)

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def is_main_content_visible(self) -> bool:
        return self.actions.is_visible(self.MAIN_CONTENT)

    def wait_for_main_content(self, timeout: float | None = None) -> None:
        """
        Block until the main content region is visible.

        Args:
            timeout: Budget in milliseconds; defaults to the medium timeout.
        """
        self.actions.wait_for_state(self.MAIN_CONTENT, "visible", timeout)

    def is_navbar_visible(self) -> bool:
        return self.actions.is_visible(self.NAVBAR)

    def is_sidebar_visible(self) -> bool:
        return self.actions.is_visible(self.SIDEBAR)

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def get_user_greeting(self) -> str | None:
        return self.actions.read_text(self.USER_GREETING)

    def get_welcome_message(self) -> str | None:
        return self.actions.read_text(self.WELCOME_MESSAGE)
