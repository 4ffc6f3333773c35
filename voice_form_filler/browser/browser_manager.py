"""
Browser Manager - Launch and manage the Playwright browser a session runs in.
"""

from typing import Optional
from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright
from ..config.settings import Settings
from ..utils.logger import logger


class BrowserManager:
    """Manages Playwright browser lifecycle."""

    def __init__(self, headless: Optional[bool] = None):
        """
        Initialize browser manager.

        Args:
            headless: Override headless setting
        """
        self.headless = headless if headless is not None else Settings.HEADLESS

        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self.launch()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def launch(self) -> Browser:
        """
        Launch browser instance.

        Returns:
            Browser instance
        """
        logger.info("Launching browser")

        self.playwright = await async_playwright().start()

        self.browser = await self.playwright.chromium.launch(
            headless=self.headless,
            args=Settings.BROWSER_ARGS,
        )

        self.context = await self.browser.new_context(
            viewport=Settings.VIEWPORT,
            locale=Settings.LOCALE,
        )

        logger.success(f"Browser launched (headless={self.headless})")
        return self.browser

    async def new_page(self) -> Page:
        """
        Create a new page.

        Returns:
            Page instance
        """
        if not self.context:
            await self.launch()

        self._page = await self.context.new_page()
        return self._page

    async def close(self):
        """Close browser and cleanup."""
        if self._page:
            await self._page.close()

        if self.context:
            await self.context.close()

        if self.browser:
            await self.browser.close()

        if self.playwright:
            await self.playwright.stop()

        logger.success("Browser closed")
