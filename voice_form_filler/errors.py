"""
Error taxonomy for voice form filling.
"""

from typing import Optional


class VoiceFormError(Exception):
    """Base class for all voice form filling errors."""


class NoFillableFields(VoiceFormError):
    """The page has no visible, enabled field to fill."""

    def __init__(self, message: str = "No form inputs found on this page."):
        super().__init__(message)


class RecognitionError(VoiceFormError):
    """Speech recognition failed for one listen attempt."""

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        super().__init__(message or f"Speech recognition error: {code}")


class RecognitionTimeout(RecognitionError):
    """No speech was captured (silence or microphone failure)."""

    def __init__(self, code: str = "no-speech", message: Optional[str] = None):
        super().__init__(code, message or f"No speech detected ({code})")


class HostError(VoiceFormError):
    """The host page could not be read or driven."""


class HostMutationFailure(HostError):
    """The host page refused or failed to update a field."""


class SessionAlreadyActive(VoiceFormError):
    """A voice form filling session is already running for this host."""

    def __init__(self, message: str = "A voice form filling session is already active."):
        super().__init__(message)
