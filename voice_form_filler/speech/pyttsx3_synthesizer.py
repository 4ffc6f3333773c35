"""
Offline text-to-speech through pyttsx3.
"""

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import pyttsx3

from ..config.settings import Settings
from ..utils.logger import logger
from .base import SpeechSynthesizer


class Pyttsx3Synthesizer(SpeechSynthesizer):
    """Speaks through the platform TTS engine on a dedicated thread."""

    def __init__(self, rate: Optional[int] = None, volume: Optional[float] = None):
        self.rate = rate or Settings.TTS_RATE
        self.volume = volume or Settings.TTS_VOLUME
        self.engine = None
        # pyttsx3 engines must stay on the thread that created them
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="tts")
        self._interrupt = threading.Event()

    def _init_engine(self):
        engine = pyttsx3.init()
        engine.setProperty('rate', self.rate)
        engine.setProperty('volume', self.volume)

        for voice in engine.getProperty('voices') or []:
            languages = [str(lang) for lang in (getattr(voice, 'languages', None) or [])]
            if any('en' in lang for lang in languages) or 'english' in (voice.name or '').lower():
                engine.setProperty('voice', voice.id)
                break

        engine.connect('started-word', self._on_word)
        return engine

    def _on_word(self, name, location, length):
        # Runs inside runAndWait on the engine thread
        if self._interrupt.is_set():
            self.engine.stop()

    def _say(self, text: str):
        if self.engine is None:
            self.engine = self._init_engine()
        self._interrupt.clear()
        self.engine.stop()
        self.engine.say(text)
        self.engine.runAndWait()

    async def speak(self, text: str):
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(self._executor, self._say, text)
        except (RuntimeError, OSError) as e:
            logger.warning(f"Speech synthesis failed: {e}")

    async def cancel(self):
        self._interrupt.set()

    def shutdown(self):
        self._executor.shutdown(wait=False)
