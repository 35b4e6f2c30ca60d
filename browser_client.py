"""
Browser Client — Playwright-based rendering session for JS-rendered pages.

Provides:
  - A single owned browser page (RenderSession) driven one step at a time
  - Resource blocking (images, fonts, media, trackers)
  - Generic consent handler for cookie banners
  - Pure-function extraction against the rendered DOM

Usage:
    async with RenderSession(BrowserConfig.from_env()) as session:
        await session.navigate("https://www.motogp.com/en/calendar")
        events = await session.evaluate(extract_event_list)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from playwright.async_api import (
    async_playwright,
    Browser,
    Error as PlaywrightError,
    Page,
    Route,
    Request,
)

from models.errors import NavigationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# extractor(html, page_url) -> T
Extractor = Callable[[str, str], T]


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------

@dataclass
class BrowserConfig:
    """Browser client configuration."""

    browser_type: str = "chromium"  # chromium | firefox | webkit
    headless: bool = True
    timeout_ms: int = 45000
    navigation_timeout_ms: int = 30000
    network_idle_timeout_ms: int = 5000
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    locale: str = "en-US"

    # Resource blocking
    block_images: bool = True
    block_fonts: bool = True
    block_media: bool = True
    block_trackers: bool = True

    handle_consent: bool = True

    @classmethod
    def from_env(cls) -> BrowserConfig:
        """Load configuration from environment variables."""
        return cls(
            browser_type=os.getenv("PLAYWRIGHT_BROWSER", "chromium"),
            headless=os.getenv("PLAYWRIGHT_HEADLESS", "true").lower() == "true",
            timeout_ms=int(os.getenv("PLAYWRIGHT_TIMEOUT", "45000")),
            navigation_timeout_ms=int(os.getenv("PLAYWRIGHT_NAV_TIMEOUT", "30000")),
        )


# ------------------------------------------------------------------
# Resource blocking
# ------------------------------------------------------------------

TRACKER_DOMAINS = {
    "google-analytics.com",
    "googletagmanager.com",
    "facebook.com",
    "twitter.com",
    "doubleclick.net",
    "analytics.google.com",
    "hotjar.com",
    "mixpanel.com",
    "segment.com",
}


async def _block_resources(route: Route, request: Request, config: BrowserConfig):
    """Route handler to block unwanted resources."""
    resource_type = request.resource_type
    url = request.url.lower()

    if config.block_images and resource_type == "image":
        await route.abort()
        return
    if config.block_fonts and resource_type == "font":
        await route.abort()
        return
    if config.block_media and resource_type == "media":
        await route.abort()
        return

    if config.block_trackers:
        for tracker in TRACKER_DOMAINS:
            if tracker in url:
                await route.abort()
                return

    await route.continue_()


# ------------------------------------------------------------------
# Consent handler
# ------------------------------------------------------------------

CONSENT_BUTTON_PATTERNS = [
    "accept all",
    "allow all",
    "i agree",
    "accept",
    "agree",
]


async def _handle_consent(page: Page) -> bool:
    """
    Try to dismiss cookie consent banners.

    Returns True if consent button found and clicked.
    """
    for pattern in CONSENT_BUTTON_PATTERNS:
        selector = f"button:has-text('{pattern}')"
        try:
            button = page.locator(selector).first
            if await button.count() > 0:
                await button.click(timeout=2000)
                await page.wait_for_timeout(500)
                return True
        except PlaywrightError:
            continue

    return False


# ------------------------------------------------------------------
# Rendering session
# ------------------------------------------------------------------

class RenderSession:
    """
    One browser, one context, one page, owned by a single caller.

    Navigation mutates the shared page, so every operation must be awaited
    before the next one starts. Do not hand this object to concurrent tasks.
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig.from_env()
        self._playwright = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None
        self._consent_done = False

    async def __aenter__(self) -> RenderSession:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def start(self):
        """
        Launch the browser and open the working page.

        Raises:
            NavigationError: If the browser cannot be launched
        """
        self._playwright = await async_playwright().start()

        if self.config.browser_type == "firefox":
            browser_type = self._playwright.firefox
        elif self.config.browser_type == "webkit":
            browser_type = self._playwright.webkit
        else:
            browser_type = self._playwright.chromium

        logger.debug("Launching %s (headless=%s)", self.config.browser_type, self.config.headless)
        try:
            self._browser = await browser_type.launch(headless=self.config.headless)

            context = await self._browser.new_context(
                user_agent=self.config.user_agent,
                locale=self.config.locale,
                viewport={"width": 1920, "height": 1080},
            )
            context.set_default_timeout(self.config.timeout_ms)
            context.set_default_navigation_timeout(self.config.navigation_timeout_ms)

            self._page = await context.new_page()
            cfg = self.config
            await self._page.route("**/*", lambda route, request: _block_resources(route, request, cfg))
        except PlaywrightError as e:
            await self.close()
            raise NavigationError(f"Could not launch {self.config.browser_type}: {e}") from e

    async def close(self):
        """Close browser and stop Playwright."""
        if self._browser:
            try:
                await self._browser.close()
            except PlaywrightError as e:
                logger.warning("Browser did not close cleanly: %s", e)
        if self._playwright:
            await self._playwright.stop()
        self._browser = None
        self._playwright = None
        self._page = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("RenderSession not started")
        return self._page

    async def navigate(self, url: str):
        """
        Load ``url`` and wait for client-side rendering to settle.

        Raises:
            NavigationError: If the page cannot be loaded
        """
        logger.debug("Navigating to %s", url)
        try:
            response = await self.page.goto(url, wait_until="domcontentloaded")
        except PlaywrightError as e:
            raise NavigationError(f"Failed to load {url}: {e}") from e

        if response is not None and response.status >= 400:
            raise NavigationError(f"Failed to load {url}: HTTP {response.status}")

        # Wait for network idle (best effort, don't fail if timeout)
        try:
            await self.page.wait_for_load_state(
                "networkidle", timeout=self.config.network_idle_timeout_ms
            )
        except PlaywrightError:
            logger.debug("Network did not go idle on %s, continuing", url)

        if self.config.handle_consent and not self._consent_done:
            self._consent_done = await _handle_consent(self.page)

    async def click(self, selector: str):
        """
        Click the first element matching ``selector``.

        Raises:
            NavigationError: If the element never appears or cannot be clicked
        """
        try:
            await self.page.click(selector)
        except PlaywrightError as e:
            raise NavigationError(f"Could not click {selector!r} on {self.page.url}: {e}") from e

    async def evaluate(self, extractor: Extractor) -> T:
        """Run a pure extraction function over the current rendered HTML."""
        html = await self.page.content()
        return extractor(html, self.page.url)
