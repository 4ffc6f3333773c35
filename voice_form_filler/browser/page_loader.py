"""
Page Loader - Load the URL to fill and wait for it to settle.
"""

import asyncio
from typing import Optional
from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError
from ..config.settings import Settings
from ..utils.logger import logger


class PageLoader:
    """Handles page loading and stabilization."""

    @staticmethod
    async def load(
        page: Page,
        url: str,
        wait_for_stability: bool = True,
        timeout: Optional[int] = None
    ) -> Page:
        """
        Load URL and wait for page stabilization.

        Args:
            page: Playwright page object
            url: URL to load
            wait_for_stability: Whether to wait for network idle
            timeout: Optional timeout override (ms)

        Returns:
            Loaded page
        """
        if not url.startswith(('http://', 'https://', 'file://')):
            raise ValueError(f"Invalid URL: {url}. Must start with http://, https:// or file://")

        timeout = timeout or Settings.PAGE_LOAD_TIMEOUT
        logger.info(f"Loading {url}")

        try:
            await page.goto(url, wait_until='domcontentloaded', timeout=timeout)
        except PlaywrightTimeoutError as e:
            logger.error(f"Page load timeout: {url}")
            raise TimeoutError(f"Failed to load {url} within {timeout}ms") from e

        if wait_for_stability:
            await PageLoader.wait_for_stability(page, timeout)

        return page

    @staticmethod
    async def wait_for_stability(page: Page, timeout: Optional[int] = None) -> bool:
        """
        Wait for network idle plus a buffer for JS frameworks.

        Returns:
            True if page stabilized, False if timeout
        """
        timeout = timeout or Settings.PAGE_LOAD_TIMEOUT

        try:
            await page.wait_for_load_state('networkidle', timeout=timeout)
            await asyncio.sleep(Settings.JS_EXECUTION_BUFFER / 1000)
            logger.success("Page loaded and stabilized")
            return True
        except PlaywrightTimeoutError:
            logger.warning(f"Page stabilization timeout after {timeout}ms")
            return False
