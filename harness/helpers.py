"""Screenshot and browser-storage helpers shared by fixtures and scenarios."""

from __future__ import annotations

import os
from datetime import datetime, timezone

from playwright.sync_api import Page

SCREENSHOT_DIR = "test-results/screenshots"


def take_screenshot(page: Page, name: str, directory: str = "screenshots") -> str:
    """
    Save a full-page screenshot with a timestamp suffix.

    Args:
        page: Playwright page to capture.
        name: Base name for the file.
        directory: Target directory, created if missing.

    Returns:
        Path to the saved screenshot.
    """
    os.makedirs(directory, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S-%f")
    path = f"{directory}/{name}-{timestamp}.png"
    page.screenshot(path=path, full_page=True)
    return path


def save_failure_screenshot(page: Page, test_name: str) -> str:
    """Save the screenshot attached to a failed test under ``test-results``."""
    os.makedirs(SCREENSHOT_DIR, exist_ok=True)
    safe_name = test_name.replace("/", "_").replace("::", "_")
    path = f"{SCREENSHOT_DIR}/{safe_name}.png"
    page.screenshot(path=path)
    return path


def clear_browser_storage(page: Page) -> None:
    """Empty localStorage and sessionStorage for the page's origin."""
    page.evaluate("() => { localStorage.clear(); sessionStorage.clear(); }")
