"""
Microphone speech recognition through the Google Web Speech API.
"""

import asyncio
from typing import Any, List, Optional

import speech_recognition as sr

from ..config.settings import Settings
from ..errors import RecognitionError, RecognitionTimeout
from ..models.dialogue import RecognitionResult
from ..utils.logger import logger
from .base import SpeechRecognizer


class GoogleSpeechRecognizer(SpeechRecognizer):
    """SpeechRecognition-backed recognizer returning ranked alternatives."""

    def __init__(self, device_index: Optional[int] = None):
        self.recognizer = sr.Recognizer()
        self.device_index = device_index
        self.microphone: Optional[sr.Microphone] = None
        self._calibrated = False
        self._cancelled = False

    async def listen(self, locale: str) -> List[RecognitionResult]:
        self._cancelled = False
        response = await asyncio.to_thread(self._capture_and_recognize, locale)

        if self._cancelled:
            raise RecognitionError('aborted', "Recognition cancelled")

        alternatives = self.parse_response(response)
        if not alternatives:
            raise RecognitionError('no-match', "Speech was not understood")
        return alternatives

    def _capture_and_recognize(self, locale: str) -> Any:
        if self.microphone is None:
            try:
                self.microphone = sr.Microphone(device_index=self.device_index)
            except (OSError, AttributeError) as e:
                raise RecognitionTimeout('audio-capture', f"Microphone unavailable: {e}") from e

        try:
            with self.microphone as source:
                if not self._calibrated:
                    self.recognizer.adjust_for_ambient_noise(
                        source, duration=Settings.AMBIENT_NOISE_DURATION
                    )
                    self._calibrated = True
                logger.debug("Listening...")
                audio = self.recognizer.listen(
                    source,
                    timeout=Settings.LISTEN_TIMEOUT,
                    phrase_time_limit=Settings.PHRASE_TIME_LIMIT,
                )
        except sr.WaitTimeoutError as e:
            raise RecognitionTimeout('no-speech') from e
        except OSError as e:
            raise RecognitionTimeout('audio-capture', f"Audio capture failed: {e}") from e

        try:
            return self.recognizer.recognize_google(audio, language=locale, show_all=True)
        except sr.UnknownValueError as e:
            raise RecognitionError('no-match', "Speech was not understood") from e
        except sr.RequestError as e:
            raise RecognitionError('network', f"Speech service error: {e}") from e

    @staticmethod
    def parse_response(response: Any) -> List[RecognitionResult]:
        """
        Convert a `show_all` response into alternatives.

        Google reports a confidence only for the top alternative; the rest
        come back without one.
        """
        if not isinstance(response, dict):
            return []

        alternatives = []
        for entry in response.get('alternative', [])[:Settings.MAX_ALTERNATIVES]:
            transcript = (entry.get('transcript') or '').strip()
            if not transcript:
                continue
            confidence = entry.get('confidence')
            alternatives.append(RecognitionResult(
                transcript=transcript,
                confidence=float(confidence) if confidence is not None else None,
            ))
        return alternatives

    async def cancel(self):
        # The capture thread cannot be interrupted; its result is discarded.
        self._cancelled = True

    async def close(self):
        self._cancelled = True
        self.microphone = None
        logger.debug("Recognizer released")
