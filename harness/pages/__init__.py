"""
Page objects for the application under test.

Each page object receives a :class:`~harness.actions.LocatorActions`
bound to a browser page and exposes the semantic operations a test
performs on one view. Selectors stay inside this package.
"""

from harness.pages.dashboard_page import DashboardPage
from harness.pages.login_page import LoginPage
from harness.pages.user_profile_page import UserProfilePage

__all__ = ["DashboardPage", "LoginPage", "UserProfilePage"]
