"""
End-to-end login scenarios.

These tests drive a real browser through the login page. Each test gets
a fresh browser context from the fixture scope, so no cookie or storage
state leaks from one scenario into another.

Key SDET Concepts Demonstrated:
- Page Object Model (POM) for maintainable UI tests
- Positive and negative authentication paths
- Absence-safe reads of optional page regions
- AAA pattern (Arrange / Act / Assert) in every test
"""

from __future__ import annotations

import re

import pytest
from playwright.sync_api import expect

from harness.config import HarnessConfig
from harness.errors import ElementNotFoundError, WaitTimeoutError
from harness.pages import DashboardPage, LoginPage

pytestmark = pytest.mark.e2e


class TestLoginFlow:
    """Tests for submitting the login form."""

    @pytest.mark.smoke
    def test_valid_credentials_land_on_dashboard(
        self, login_page: LoginPage, dashboard_page: DashboardPage, session
    ):
        """Test that the default test user reaches the dashboard."""
        # Arrange
        login_page.navigate_to_login()

        # Act
        login_page.login("testuser@example.com", "TestPassword123!")

        # Assert
        dashboard_page.wait_for_main_content()
        assert dashboard_page.is_main_content_visible()
        expect(session).to_have_url(re.compile(r".*/dashboard"))

    def test_malformed_email_shows_error_without_navigation(
        self, login_page: LoginPage, session
    ):
        """Test that an invalid email keeps the user on the login page with an error."""
        # Arrange
        login_page.navigate_to_login()
        submitted = []
        session.on(
            "request",
            lambda request: submitted.append(request.url) if request.method == "POST" else None,
        )

        # Act
        login_page.enter_email("invalid-email")
        login_page.enter_password("TestPassword123!")
        login_page.click_login()

        # Assert
        login_page.wait_for_error_message()
        assert "valid email" in login_page.get_error_message()
        assert submitted == []
        expect(session).to_have_url(re.compile(r".*/login$"))

    def test_wrong_password_reports_invalid_credentials(self, login_page: LoginPage):
        """Test that a wrong password shows the invalid-credentials message."""
        # Arrange
        login_page.navigate_to_login()

        # Act
        login_page.enter_email("testuser@example.com")
        login_page.enter_password("WrongPassword123!")
        login_page.click_login()
        login_page.wait_for_error_message()

        # Assert
        assert "Invalid credentials" in login_page.get_error_message()

    def test_configured_credentials_log_in(
        self, login_page: LoginPage, dashboard_page: DashboardPage, harness_config: HarnessConfig
    ):
        """Test logging in with the credentials from the harness configuration."""
        login_page.navigate_to_login()

        login_page.login(harness_config.user.email, harness_config.user.password)

        dashboard_page.wait_for_main_content()
        assert dashboard_page.get_user_greeting()


class TestLoginPageLinks:
    """Tests for the secondary links on the login page."""

    def test_signup_link(self, login_page: LoginPage, session):
        login_page.navigate_to_login()

        login_page.click_signup()

        expect(session).to_have_url(re.compile(r".*/signup"))

    def test_forgot_password_link(self, login_page: LoginPage, session):
        login_page.navigate_to_login()

        login_page.click_forgot_password()

        expect(session).to_have_url(re.compile(r".*/forgot-password"))


class TestLocatorErrors:
    """Tests for how the action layer reports missing and slow elements."""

    def test_fresh_login_page_has_no_error(self, login_page: LoginPage):
        """Test that reading an absent error region returns None instead of raising."""
        login_page.navigate_to_login()

        assert login_page.get_error_message() is None
        assert login_page.is_error_message_visible() is False

    def test_clicking_missing_element_raises_not_found(self, login_page: LoginPage, actions):
        login_page.navigate_to_login()

        with pytest.raises(ElementNotFoundError):
            actions.click('[data-testid="does-not-exist"]')

    def test_waiting_for_absent_element_times_out(self, login_page: LoginPage, actions):
        login_page.navigate_to_login()

        with pytest.raises(WaitTimeoutError):
            actions.wait_for_state(LoginPage.ERROR_MESSAGE, "visible", timeout=500)
