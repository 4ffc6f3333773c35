"""
Narrator - the visual and spoken side channel of a session.
"""

from dataclasses import dataclass
from typing import List

from ..browser.host import FormHost
from ..speech.base import SpeechSynthesizer
from ..utils.logger import logger


@dataclass
class NarrationEntry:
    channel: str  # 'status' or 'speech'
    text: str


class Narrator:
    """Shows status lines on the host and speaks through the synthesizer."""

    def __init__(self, host: FormHost, synthesizer: SpeechSynthesizer):
        self.host = host
        self.synthesizer = synthesizer
        self.entries: List[NarrationEntry] = []

    async def status(self, message: str):
        self.entries.append(NarrationEntry('status', message))
        logger.info(f"[STATUS] {message}")
        await self.host.show_status(message)

    async def say(self, text: str):
        self.entries.append(NarrationEntry('speech', text))
        logger.debug(f"[SPEECH] {text}")
        await self.synthesizer.speak(text)

    async def cancel(self):
        await self.synthesizer.cancel()

    def spoken(self) -> List[str]:
        return [entry.text for entry in self.entries if entry.channel == 'speech']

    def statuses(self) -> List[str]:
        return [entry.text for entry in self.entries if entry.channel == 'status']
