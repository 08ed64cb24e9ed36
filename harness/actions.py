"""
Locator action layer.

Page objects never call Playwright directly; they go through
:class:`LocatorActions`, which turns the driver's per-call primitives
into a handful of verbs addressed by a selector string. Swapping the
driver means rewriting this module only.

Every verb looks its element up again when called, so nothing is cached
between calls. Reads are absence-safe: ``read_text`` returns ``None`` and
``is_visible`` returns ``False`` for a query that matches nothing.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from harness.config import HarnessConfig, Timeouts
from harness.errors import (
    ElementNotActionableError,
    ElementNotFoundError,
    NavigationError,
    WaitTimeoutError,
)

logger = logging.getLogger(__name__)


class LocatorActions:
    """
    Element verbs bound to one browser page.

    Attributes:
        page: Playwright page the verbs act on.
        base_url: Prefix for paths passed to :meth:`navigate`.
        timeouts: Wait budgets in milliseconds.
    """

    WAIT_STATES = ("visible", "hidden")

    def __init__(self, page: Page, base_url: str, timeouts: Timeouts | None = None):
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.timeouts = timeouts or Timeouts()

    @classmethod
    def from_config(cls, page: Page, config: HarnessConfig) -> "LocatorActions":
        return cls(page, config.base_url, config.timeouts)

    @property
    def url(self) -> str:
        """Current URL of the page."""
        return self.page.url

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self, path: str = "/") -> None:
        """
        Request navigation to ``path`` relative to the base URL.

        Returns as soon as the browser has committed to the navigation;
        call :meth:`wait_for_settle` to wait for the page to finish loading.

        Raises:
            NavigationError: The browser rejected or could not reach the URL.
        """
        url = f"{self.base_url}{path}"
        logger.debug("navigate %s", url)
        try:
            self.page.goto(url, wait_until="commit")
        except PlaywrightError as exc:
            raise NavigationError(url) from exc

    def wait_for_settle(self, timeout: float | None = None) -> None:
        """Wait until the page has no network activity left."""
        budget = self.timeouts.long if timeout is None else timeout
        try:
            self.page.wait_for_load_state("networkidle", timeout=budget)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(self.page.url, "networkidle", budget) from exc

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def click(self, query: str) -> None:
        """Click the first element matching ``query``."""
        locator = self._resolve(query)
        logger.debug("click %s", query)
        try:
            locator.click(timeout=self.timeouts.medium)
        except PlaywrightError as exc:
            raise ElementNotActionableError(query, "click") from exc

    def fill(self, query: str, text: str) -> None:
        """Replace the value of the first input matching ``query`` with ``text``."""
        locator = self._resolve(query)
        logger.debug("fill %s", query)
        try:
            locator.fill(text, timeout=self.timeouts.medium)
        except PlaywrightError as exc:
            raise ElementNotActionableError(query, "fill") from exc

    def clear(self, query: str) -> None:
        """Empty the first input matching ``query``."""
        locator = self._resolve(query)
        try:
            locator.clear(timeout=self.timeouts.medium)
        except PlaywrightError as exc:
            raise ElementNotActionableError(query, "clear") from exc

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def read_text(self, query: str) -> str | None:
        """Text content of the first match, or ``None`` if nothing matches."""
        matches = self.page.locator(query)
        if matches.count() == 0:
            return None
        try:
            return matches.first.text_content(timeout=self.timeouts.short)
        except PlaywrightTimeoutError:
            # Detached between the count and the read.
            return None

    def read_value(self, query: str) -> str | None:
        """Current value of the first matching input, or ``None`` if absent."""
        matches = self.page.locator(query)
        if matches.count() == 0:
            return None
        try:
            return matches.first.input_value(timeout=self.timeouts.short)
        except PlaywrightTimeoutError:
            return None

    def is_visible(self, query: str) -> bool:
        """Whether the first match is visible; ``False`` when nothing matches."""
        return self.page.locator(query).first.is_visible()

    # -------------------------------------------------------------------------
    # Waits
    # -------------------------------------------------------------------------

    def wait_for_state(self, query: str, state: str, timeout: float | None = None) -> None:
        """
        Block until the first match is ``visible`` or ``hidden``.

        Args:
            query: Selector of the element to watch.
            state: ``"visible"`` or ``"hidden"``.
            timeout: Budget in milliseconds; defaults to the medium timeout.

        Raises:
            ValueError: ``state`` is not a supported state.
            WaitTimeoutError: The state was not reached in time.
        """
        if state not in self.WAIT_STATES:
            raise ValueError(f"state must be one of {self.WAIT_STATES}, got {state!r}")
        budget = self.timeouts.medium if timeout is None else timeout
        try:
            self.page.locator(query).first.wait_for(state=state, timeout=budget)
        except PlaywrightTimeoutError as exc:
            raise WaitTimeoutError(query, state, budget) from exc

    def _resolve(self, query: str) -> Locator:
        matches = self.page.locator(query)
        if matches.count() == 0:
            raise ElementNotFoundError(query)
        return matches.first
