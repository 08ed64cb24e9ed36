"""Login page object for authentication flows."""

from __future__ import annotations

from harness.actions import LocatorActions
from harness.pages import paths


class LoginPage:
    """
    Page object for the login page.

    Provides methods for:
    - Entering credentials
    - Submitting the login form
    - Reading the error message
    - Navigating to signup and password recovery
    """

    URL_PATH = paths.LOGIN

    EMAIL_INPUT = 'input[type="email"]'
    PASSWORD_INPUT = 'input[type="password"]'
    LOGIN_BUTTON = 'button:has-text("Login")'
    ERROR_MESSAGE = '[data-testid="error-message"]'
    SIGNUP_LINK = 'a:has-text("Sign up")'
    FORGOT_PASSWORD_LINK = 'a:has-text("Forgot password")'

    def __init__(self, actions: LocatorActions):
        """
        Initialize LoginPage.

        Args:
            actions: Locator actions bound to the browser page.
        """
        self.actions = actions

    def navigate_to_login(self) -> "LoginPage":
        """
        Navigate to the login page and wait for it to settle.

        Returns:
            Self for method chaining.
        """
        self.actions.navigate(self.URL_PATH)
        self.actions.wait_for_settle()
        return self

    # -------------------------------------------------------------------------
    # Form Actions
    # -------------------------------------------------------------------------

    def enter_email(self, email: str) -> None:
        self.actions.fill(self.EMAIL_INPUT, email)

    def enter_password(self, password: str) -> None:
        self.actions.fill(self.PASSWORD_INPUT, password)

    def click_login(self) -> None:
        self.actions.click(self.LOGIN_BUTTON)

    def login(self, email: str, password: str) -> None:
        """
        Fill credentials, submit the form and wait for the result page.

        On success the browser ends on the dashboard; on rejection it stays
        on the login page with the error message shown.

        Args:
            email: Email address to enter.
            password: Password to enter.
        """
        self.enter_email(email)
        self.enter_password(password)
        self.click_login()
        self.actions.wait_for_settle()

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    def get_error_message(self) -> str | None:
        """Text of the error region, or ``None`` when no error is shown."""
        return self.actions.read_text(self.ERROR_MESSAGE)

    def is_error_message_visible(self) -> bool:
        return self.actions.is_visible(self.ERROR_MESSAGE)

    def wait_for_error_message(self, timeout: float | None = None) -> None:
        """Block until the error region is visible."""
        self.actions.wait_for_state(self.ERROR_MESSAGE, "visible", timeout)

    # -------------------------------------------------------------------------
    # Navigation Links
    # -------------------------------------------------------------------------

    def click_signup(self) -> None:
        self.actions.click(self.SIGNUP_LINK)

    def click_forgot_password(self) -> None:
        self.actions.click(self.FORGOT_PASSWORD_LINK)
