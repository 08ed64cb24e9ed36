"""
User Profile Page Object.

This page object encapsulates the profile view and its edit form.

Field updates clear the input before filling it, so a value typed by an
earlier step never concatenates with the new one.
"""

from __future__ import annotations

from harness.actions import LocatorActions
from harness.pages import paths


class UserProfilePage:
    """
    Page object for the user profile page.

    Provides methods for:
    - Opening the edit form
    - Updating name and phone fields
    - Saving or cancelling the edit
    - Reading the confirmation message and the account email
    """

    URL_PATH = paths.PROFILE

    PROFILE_HEADER = '[data-testid="profile-header"]'
    EDIT_PROFILE_BUTTON = 'button:has-text("Edit Profile")'
    FIRST_NAME_INPUT = 'input[name="firstName"]'
    LAST_NAME_INPUT = 'input[name="lastName"]'
    EMAIL_DISPLAY = '[data-testid="email-display"]'
    PHONE_INPUT = 'input[name="phone"]'
    AVATAR_IMAGE = '[data-testid="avatar-image"]'
    SAVE_BUTTON = 'button:has-text("Save")'
    CANCEL_BUTTON = 'button:has-text("Cancel")'
    SUCCESS_MESSAGE = '[data-testid="success-message"]'
    CHANGE_PASSWORD_LINK = 'a:has-text("Change Password")'

    def __init__(self, actions: LocatorActions):
        """
        Initialize UserProfilePage.

        Args:
            actions: Locator actions bound to the browser page.
        """
        self.actions = actions

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate_to_profile(self) -> "UserProfilePage":
        """
        Navigate to the profile page and wait for it to settle.

        Returns:
            Self for method chaining.
        """
        self.actions.navigate(self.URL_PATH)
        self.actions.wait_for_settle()
        return self

    def click_change_password(self) -> None:
        self.actions.click(self.CHANGE_PASSWORD_LINK)

    # -------------------------------------------------------------------------
    # Form Actions
    # -------------------------------------------------------------------------

    def click_edit_profile(self) -> "UserProfilePage":
        """
        Open the edit form and wait until its fields are visible.

        Returns:
            Self for method chaining.
        """
        self.actions.click(self.EDIT_PROFILE_BUTTON)
        self.actions.wait_for_state(self.FIRST_NAME_INPUT, "visible")
        return self

    def update_first_name(self, first_name: str) -> "UserProfilePage":
        return self._replace(self.FIRST_NAME_INPUT, first_name)

    def update_last_name(self, last_name: str) -> "UserProfilePage":
        return self._replace(self.LAST_NAME_INPUT, last_name)

    def update_phone(self, phone: str) -> "UserProfilePage":
        return self._replace(self.PHONE_INPUT, phone)

    def click_save(self) -> None:
        """Submit the edit form and wait for the response page."""
        self.actions.click(self.SAVE_BUTTON)
        self.actions.wait_for_settle()

    def click_cancel(self) -> None:
        """Discard the edit and wait for the form to close."""
        self.actions.click(self.CANCEL_BUTTON)
        self.actions.wait_for_state(self.FIRST_NAME_INPUT, "hidden")

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def is_profile_header_visible(self) -> bool:
        return self.actions.is_visible(self.PROFILE_HEADER)

    def is_avatar_visible(self) -> bool:
        return self.actions.is_visible(self.AVATAR_IMAGE)

    def get_success_message(self) -> str | None:
        return self.actions.read_text(self.SUCCESS_MESSAGE)

    def get_email_display(self) -> str | None:
        return self.actions.read_text(self.EMAIL_DISPLAY)

    def get_first_name(self) -> str | None:
        """
        Current value of the first-name input.

        Readable while the edit form is closed too (it is only hidden);
        ``None`` only when the page has no such input.
        """
        return self.actions.read_value(self.FIRST_NAME_INPUT)

    def get_last_name(self) -> str | None:
        return self.actions.read_value(self.LAST_NAME_INPUT)

    def get_phone(self) -> str | None:
        return self.actions.read_value(self.PHONE_INPUT)

    def _replace(self, query: str, value: str) -> "UserProfilePage":
        self.actions.clear(query)
        self.actions.fill(query, value)
        return self
