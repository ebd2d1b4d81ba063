"""
Session Provisioner - one headless Chromium with a mobile page per extraction

Usage:
    provisioner = SessionProvisioner(LaunchOptions(executable_path="/usr/bin/chromium"))
    session = await provisioner.acquire()
    try:
        await session.page.goto(url)
    finally:
        await session.release()
"""

import logging
from typing import Optional

from playwright.async_api import async_playwright

from .errors import SessionError
from .options import LaunchOptions, MobileIdentity, NavigationOptions

logger = logging.getLogger(__name__)


class BrowserSession:
    """Owns a Playwright driver, browser, context and page"""

    def __init__(self, playwright=None, browser=None, context=None, page=None):
        self.playwright = playwright
        self.browser = browser
        self.context = context
        self.page = page
        self.released = False

    async def release(self):
        """Close page, context, browser, then stop the driver. Never raises."""
        if self.released:
            return
        self.released = True
        for name, closer in (
            ("page", self.page.close if self.page else None),
            ("context", self.context.close if self.context else None),
            ("browser", self.browser.close if self.browser else None),
            ("playwright", self.playwright.stop if self.playwright else None),
        ):
            if closer is None:
                continue
            try:
                await closer()
            except Exception as e:
                logger.error(f"Error closing {name}: {e}")


class SessionProvisioner:
    def __init__(
        self,
        launch_options: Optional[LaunchOptions] = None,
        identity: Optional[MobileIdentity] = None,
        navigation: Optional[NavigationOptions] = None,
        playwright_factory=async_playwright,
    ):
        self.launch_options = launch_options or LaunchOptions()
        self.identity = identity or MobileIdentity()
        self.navigation = navigation or NavigationOptions()
        self._playwright_factory = playwright_factory

    async def acquire(self) -> BrowserSession:
        """
        Launch a browser and open a page configured with the mobile identity.

        Raises:
            SessionError: launch or page construction failed; anything opened
                before the failure is closed first
        """
        session = BrowserSession()
        try:
            session.playwright = await self._playwright_factory().start()
            session.browser = await session.playwright.chromium.launch(
                **self.launch_options.to_kwargs()
            )
            logger.info("Browser launched successfully")
        except Exception as e:
            await session.release()
            raise SessionError(f"Browser launch failed: {e}") from e

        try:
            session.context = await session.browser.new_context(**self.identity.context_args())
            session.page = await session.context.new_page()
            session.page.set_default_timeout(self.navigation.timeout_ms)
            session.page.set_default_navigation_timeout(self.navigation.timeout_ms)
        except Exception as e:
            await session.release()
            raise SessionError(f"Page creation failed: {e}") from e
        return session
