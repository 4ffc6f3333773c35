"""
Field Classifier - Resolve a field's label and semantic category.
"""

import re
from typing import Tuple

from ..config.settings import Settings
from ..models.dialogue import SemanticCategory
from ..models.field import Field
from ..utils.logger import logger


_TRAILING_MARKS = re.compile(r'[*:\s]+$')
_WHITESPACE = re.compile(r'\s+')
_LEADING_VERB = re.compile(r'^(enter|input|type)\s+', re.IGNORECASE)
_TRAILING_WORD = re.compile(r'\s+(here|below)$', re.IGNORECASE)
_SLUG_SEPARATORS = re.compile(r'[_-]')
_WORD_START = re.compile(r'\b\w')


class FieldClassifier:
    """Maps field metadata to a semantic category and a readable label."""

    @staticmethod
    def classify(field: Field) -> Tuple[SemanticCategory, str]:
        """
        Classify a single field.

        Args:
            field: Field object

        Returns:
            (category, cleaned label); the label is empty when nothing
            describes the field
        """
        label = FieldClassifier.resolve_label(field)
        category = FieldClassifier.detect_category(field, label)
        cleaned = FieldClassifier.clean_label(label)

        logger.debug(f"Classified {field!r} as {category.value} ({cleaned!r})")
        return category, cleaned

    @staticmethod
    def resolve_label(field: Field) -> str:
        """
        Get the best available label for a field.

        Resolution order:
        1. Label associated by `for`
        2. Enclosing label, minus the field's own value
        3. Preceding sibling text
        4. Placeholder
        5. Name, de-slugified
        """
        if field.label_text:
            return field.label_text
        if field.enclosing_label_text:
            return field.enclosing_label_text
        if field.preceding_text:
            return field.preceding_text
        if field.placeholder:
            return field.placeholder
        if field.name:
            return FieldClassifier.deslugify(field.name)
        return ''

    @staticmethod
    def detect_category(field: Field, label: str) -> SemanticCategory:
        """First category in FIELD_PATTERNS order whose keyword occurs in the metadata."""
        field_text = ' '.join([
            field.id or '',
            field.name or '',
            field.placeholder or '',
            label or '',
            field.input_type or '',
        ]).lower()

        for category, patterns in Settings.FIELD_PATTERNS.items():
            if any(pattern in field_text for pattern in patterns):
                return SemanticCategory(category)

        return SemanticCategory.TEXT

    @staticmethod
    def clean_label(label: str) -> str:
        """Remove trailing marks, filler verbs and filler suffixes."""
        label = _TRAILING_MARKS.sub('', label)
        label = _WHITESPACE.sub(' ', label).strip()
        label = _LEADING_VERB.sub('', label)
        label = _TRAILING_WORD.sub('', label)
        return label

    @staticmethod
    def deslugify(name: str) -> str:
        """`first_name` -> `First Name`."""
        spaced = _SLUG_SEPARATORS.sub(' ', name)
        return _WORD_START.sub(lambda match: match.group().upper(), spaced)
