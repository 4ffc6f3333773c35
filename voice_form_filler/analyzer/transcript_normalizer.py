"""
Transcript Normalizer - Turn recognized speech into a field value.

Spoken tokens are first replaced with literals from the voice correction
table (whole words only), then a category-specific rule is applied.

Email dictation keeps the word "dot" as spoken. Between a provider and a
top-level domain ("gmail dot com") it is dropped as a separator, so
"john dot smith at gmail dot com" becomes "johndotsmith@gmailcom".
"""

import re
from typing import Iterable, Union

from ..config.settings import Settings
from ..models.dialogue import SemanticCategory


_WORD_START = re.compile(r'\b\w')
_NON_DIGIT = re.compile(r'\D')
_WHITESPACE = re.compile(r'\s+')


def _whole_word(token: str) -> re.Pattern:
    return re.compile(r'\b' + re.escape(token) + r'\b', re.IGNORECASE)


class TranscriptNormalizer:
    """Normalizes raw transcripts per semantic category."""

    @staticmethod
    def normalize(raw: str, category: Union[SemanticCategory, str]) -> str:
        """
        Normalize a transcript for a field category.

        Args:
            raw: Transcript as recognized
            category: Semantic category of the target field

        Returns:
            Value ready to commit
        """
        category = SemanticCategory(category)
        keep = Settings.EMAIL_LITERAL_WORDS if category == SemanticCategory.EMAIL else ()
        text = TranscriptNormalizer.apply_corrections(raw.strip().lower(), keep=keep)

        if category == SemanticCategory.EMAIL:
            return TranscriptNormalizer.normalize_email(text)
        if category == SemanticCategory.PHONE:
            return TranscriptNormalizer.normalize_phone(text)
        if category == SemanticCategory.DATE:
            return TranscriptNormalizer.normalize_date(text)
        if category == SemanticCategory.NAME:
            return TranscriptNormalizer.normalize_name(text)
        return text

    @staticmethod
    def apply_corrections(text: str, keep: Iterable[str] = ()) -> str:
        """Replace spoken tokens with their literal characters."""
        keep = set(keep)
        for spoken, actual in Settings.VOICE_CORRECTIONS.items():
            if spoken in keep:
                continue
            text = _whole_word(spoken).sub(lambda _: actual, text)
        return text

    @staticmethod
    def normalize_email(text: str) -> str:
        providers = '|'.join(map(re.escape, Settings.EMAIL_PROVIDER_TOKENS))
        domains = '|'.join(map(re.escape, Settings.EMAIL_DOMAIN_TOKENS))

        # "gmail dot com" -> "gmailcom"
        text = re.sub(
            rf'\s*\b({providers})\s+(?:dot\s+)?(?=(?:{domains})\b)', r'\1', text
        )
        text = re.sub(rf'\s*\b({providers}|{domains})\b\s*', r'\1', text)
        return _WHITESPACE.sub('', text)

    @staticmethod
    def normalize_phone(text: str) -> str:
        return _NON_DIGIT.sub('', text)

    @staticmethod
    def normalize_date(text: str) -> str:
        for number, names in Settings.MONTHS.items():
            pattern = re.compile(r'\b(?:' + '|'.join(names) + r')\b', re.IGNORECASE)
            text = pattern.sub(number, text)
        return text

    @staticmethod
    def normalize_name(text: str) -> str:
        return _WORD_START.sub(lambda match: match.group().upper(), text)
