"""Speech services for Voice Form Filler."""

from .base import ConfirmationPrompt, SpeechRecognizer, SpeechSynthesizer
from .console_prompt import ConsolePrompt

__all__ = ['ConfirmationPrompt', 'SpeechRecognizer', 'SpeechSynthesizer', 'ConsolePrompt']
