"""
Speech service interfaces consumed by the dialogue controller.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.dialogue import RecognitionResult


class SpeechRecognizer(ABC):
    """Speech-to-text: one listen attempt per call."""

    @abstractmethod
    async def listen(self, locale: str) -> List[RecognitionResult]:
        """
        Capture one utterance.

        Returns:
            Ranked alternatives for the utterance

        Raises:
            RecognitionTimeout: nothing was said or the microphone failed
            RecognitionError: any other recognition failure
        """

    async def cancel(self):
        """Abort an in-flight listen attempt."""

    async def close(self):
        """Release held resources (microphone, network sessions)."""


class SpeechSynthesizer(ABC):
    """Text-to-speech, best effort."""

    @abstractmethod
    async def speak(self, text: str):
        """Say text, cancelling whatever is still being said."""

    async def cancel(self):
        """Stop the current and queued utterances."""


class ConfirmationPrompt(ABC):
    """Synchronous yes/no question to the user."""

    @abstractmethod
    async def confirm(self, question: str) -> bool:
        """Return True when the user accepts."""
