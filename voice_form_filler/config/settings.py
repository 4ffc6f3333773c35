"""
Configuration settings for the Voice Form Filler.
Controls the dialogue thresholds, pacing, speech services and lexical tables.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


class Settings:
    """Central configuration for voice form filling."""

    # Locale (single fixed locale)
    LOCALE: str = "en-US"

    # Dialogue rules
    CONFIDENCE_THRESHOLD: float = 0.7
    MAX_RETRIES: int = 3
    OPTION_PREVIEW_COUNT: int = 3

    # Pauses between transitions (in seconds) - let voice output settle
    INTRO_DELAY: float = 2.0
    LISTEN_DELAY: float = 0.5
    RETRY_DELAY: float = 2.0
    ERROR_RETRY_DELAY: float = 3.0
    ADVANCE_DELAY: float = 2.5
    SKIP_DELAY: float = 2.0
    NO_MATCH_DELAY: float = 3.0

    # Speech recognition
    LISTEN_TIMEOUT: int = 8  # seconds to wait for speech to start
    PHRASE_TIME_LIMIT: int = 15  # seconds
    AMBIENT_NOISE_DURATION: float = 0.5
    MAX_ALTERNATIVES: int = 5

    # Speech synthesis
    TTS_RATE: int = 150
    TTS_VOLUME: float = 0.9

    # Browser settings
    HEADLESS: bool = False
    PAGE_LOAD_TIMEOUT: int = 30000  # 30 seconds
    JS_EXECUTION_BUFFER: int = 1000  # 1 second additional wait for JS frameworks
    VIEWPORT: Dict[str, int] = {'width': 1366, 'height': 768}
    BROWSER_ARGS: List[str] = [
        '--disable-blink-features=AutomationControlled',
        '--disable-dev-shm-usage',
        '--use-fake-ui-for-media-stream',
    ]

    # Element filtering rules
    IGNORE_TAGS: set = {
        'script', 'style', 'meta', 'link', 'noscript', 'template'
    }
    CANDIDATE_TAGS: Tuple[str, ...] = ('input', 'textarea', 'select')
    EXCLUDED_INPUT_TYPES: set = {
        'hidden', 'submit', 'button', 'reset', 'image'
    }

    # Field type detection patterns (order is priority)
    FIELD_PATTERNS: Dict[str, Tuple[str, ...]] = {
        'email': ('email', 'e-mail', 'mail', 'contact'),
        'phone': ('phone', 'tel', 'mobile', 'number', 'contact'),
        'name': ('name', 'first', 'last', 'full', 'fname', 'lname'),
        'address': ('address', 'street', 'city', 'zip', 'postal', 'location'),
        'date': ('date', 'birth', 'dob', 'birthday', 'born'),
        'password': ('password', 'pass', 'pwd', 'secret'),
        'age': ('age', 'years', 'old'),
        'gender': ('gender', 'sex'),
        'company': ('company', 'organization', 'employer', 'work'),
        'title': ('title', 'position', 'job', 'role'),
        'website': ('website', 'url', 'site', 'link'),
        'country': ('country', 'nation'),
        'state': ('state', 'province', 'region'),
        'comment': ('comment', 'message', 'note', 'feedback', 'description'),
    }

    # Spoken token -> literal substitution
    VOICE_CORRECTIONS: Dict[str, str] = {
        'at': '@',
        'dot': '.',
        'dash': '-',
        'underscore': '_',
        'space': ' ',
        'comma': ',',
        'period': '.',
        'exclamation': '!',
        'question mark': '?',
        'hashtag': '#',
        'dollar': '$',
        'percent': '%',
        'ampersand': '&',
        'plus': '+',
        'equals': '=',
        'zero': '0', 'one': '1', 'two': '2', 'three': '3', 'four': '4',
        'five': '5', 'six': '6', 'seven': '7', 'eight': '8', 'nine': '9',
    }

    # Email dictation
    EMAIL_LITERAL_WORDS: set = {'dot'}
    EMAIL_PROVIDER_TOKENS: Tuple[str, ...] = ('gmail', 'yahoo', 'hotmail', 'outlook')
    EMAIL_DOMAIN_TOKENS: Tuple[str, ...] = ('com', 'org', 'net')

    # Month names -> two digit month
    MONTHS: Dict[str, Tuple[str, ...]] = {
        '01': ('january', 'jan'), '02': ('february', 'feb'), '03': ('march', 'mar'),
        '04': ('april', 'apr'), '05': ('may',), '06': ('june', 'jun'),
        '07': ('july', 'jul'), '08': ('august', 'aug'), '09': ('september', 'sep'),
        '10': ('october', 'oct'), '11': ('november', 'nov'), '12': ('december', 'dec'),
    }

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG_MODE: bool = False

    @classmethod
    def update(cls, **kwargs):
        """Update settings dynamically."""
        for key, value in kwargs.items():
            if hasattr(cls, key.upper()):
                setattr(cls, key.upper(), value)


@dataclass
class TransitionDelays:
    """Pauses inserted between dialogue transitions (seconds)."""

    intro: float = 0.0
    listen: float = 0.0
    retry: float = 0.0
    error_retry: float = 0.0
    advance: float = 0.0
    skip: float = 0.0
    no_match: float = 0.0

    @classmethod
    def from_settings(cls) -> 'TransitionDelays':
        """Snapshot the current delay settings."""
        return cls(
            intro=Settings.INTRO_DELAY,
            listen=Settings.LISTEN_DELAY,
            retry=Settings.RETRY_DELAY,
            error_retry=Settings.ERROR_RETRY_DELAY,
            advance=Settings.ADVANCE_DELAY,
            skip=Settings.SKIP_DELAY,
            no_match=Settings.NO_MATCH_DELAY,
        )

    @classmethod
    def none(cls) -> 'TransitionDelays':
        """No pauses at all."""
        return cls()
