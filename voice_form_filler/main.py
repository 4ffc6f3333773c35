"""
Voice Form Filler - Main Entry Point
Opens a page and fills its form by voice, one field at a time.
"""

import asyncio
import argparse
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from .browser.browser_manager import BrowserManager
from .browser.page_host import PlaywrightHost
from .browser.page_loader import PageLoader
from .config.settings import Settings, TransitionDelays
from .dialogue.controller import DialogueController
from .models.dialogue import SessionPhase, SessionReport
from .speech.console_prompt import ConsolePrompt
from .speech.google_recognizer import GoogleSpeechRecognizer
from .speech.pyttsx3_synthesizer import Pyttsx3Synthesizer
from .utils.logger import logger


@asynccontextmanager
async def browser_session(
    url: str,
    headless: Optional[bool] = None,
    delays: Optional[TransitionDelays] = None,
) -> AsyncIterator[DialogueController]:
    """
    Open a page in a browser and yield a controller wired to it.

    The browser and the speech engine are released on exit.
    """
    synthesizer = Pyttsx3Synthesizer()
    try:
        async with BrowserManager(headless=headless) as browser_manager:
            page = await browser_manager.new_page()
            await PageLoader.load(page, url)

            yield DialogueController(
                PlaywrightHost(page),
                GoogleSpeechRecognizer(),
                synthesizer,
                ConsolePrompt(),
                delays=delays,
            )
    finally:
        synthesizer.shutdown()


async def fill_form(
    url: str,
    headless: Optional[bool] = None,
    delays: Optional[TransitionDelays] = None,
    offer_submit: bool = True,
) -> SessionReport:
    """
    Run one voice form filling session against a URL.

    Args:
        url: Page with the form to fill
        headless: Run browser in headless mode
        delays: Pauses between dialogue transitions
        offer_submit: Ask whether to submit once all fields are visited

    Returns:
        SessionReport
    """
    logger.info("=" * 60)
    logger.info("Voice Form Filler")
    logger.info("=" * 60)

    async with browser_session(url, headless=headless, delays=delays) as controller:
        report = await controller.run()

        print("\n" + report.summary())

        if report.phase == SessionPhase.COMPLETED and offer_submit:
            question = "Form filling completed! Would you like to submit the form now?"
            if await controller.prompt.confirm(question):
                await controller.submit()
            else:
                await controller.decline_submit()

        if not _is_headless(headless):
            await asyncio.to_thread(input, "Press Enter to close the browser...")

        return report


def _is_headless(headless: Optional[bool]) -> bool:
    return Settings.HEADLESS if headless is None else headless


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Voice Form Filler - fill a web form by speaking"
    )

    parser.add_argument(
        '--url',
        type=str,
        required=True,
        help='URL of the page with the form (e.g., https://example.com/signup)'
    )

    parser.add_argument(
        '--headless',
        action='store_true',
        help='Run browser in headless mode (default: visible)'
    )

    parser.add_argument(
        '--fast',
        action='store_true',
        help='Skip the pauses between dialogue steps'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    if args.debug:
        Settings.update(log_level="DEBUG", debug_mode=True)
        logger.set_level("DEBUG")

    delays = TransitionDelays.none() if args.fast else None

    try:
        report = asyncio.run(fill_form(url=args.url, headless=args.headless or None, delays=delays))
    except KeyboardInterrupt:
        logger.warning("\nVoice form filling interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"\nFatal error: {str(e)}")
        sys.exit(1)

    if report.phase == SessionPhase.ABORTED:
        sys.exit(2)


if __name__ == '__main__':
    main()
