"""
Texts spoken and shown during a session.
"""

from typing import List

from ..config.settings import Settings
from ..models.dialogue import SemanticCategory
from ..models.field import Field, FieldKind, FieldOption


TYPE_DESCRIPTIONS = {
    SemanticCategory.EMAIL: 'email address',
    SemanticCategory.PHONE: 'phone number',
    SemanticCategory.NAME: 'name',
    SemanticCategory.ADDRESS: 'address',
    SemanticCategory.DATE: 'date',
    SemanticCategory.PASSWORD: 'password',
    SemanticCategory.AGE: 'age',
    SemanticCategory.GENDER: 'gender',
    SemanticCategory.COMPANY: 'company name',
    SemanticCategory.TITLE: 'job title',
    SemanticCategory.WEBSITE: 'website URL',
    SemanticCategory.COUNTRY: 'country',
    SemanticCategory.STATE: 'state or province',
    SemanticCategory.COMMENT: 'comments or message',
    SemanticCategory.TEXT: 'text',
}

CATEGORY_HINTS = {
    SemanticCategory.EMAIL: "For example, say 'john dot smith at gmail dot com'",
    SemanticCategory.PHONE: "Just say the numbers",
    SemanticCategory.DATE: "Say the date in month day year format",
    SemanticCategory.PASSWORD: "Speak your password clearly",
    SemanticCategory.NAME: "Speak your full name",
}

KIND_DESCRIPTIONS = {
    FieldKind.MULTILINE: 'text area for longer text',
    FieldKind.NUMERIC: 'number',
    FieldKind.CHECKBOX: 'checkbox',
    FieldKind.RADIO: 'radio button',
}


def option_list(options: List[FieldOption], limit: int = 0) -> str:
    texts = [opt.text for opt in options]
    if limit and len(texts) > limit:
        return f"{', '.join(texts[:limit])} and {len(texts) - limit} more"
    return ', '.join(texts)


class Prompts:
    """Message builders for narration and status output."""

    @staticmethod
    def describe(category: SemanticCategory, field: Field) -> str:
        """Short description of what a field expects."""
        if field.is_enumeration():
            choices = field.choice_options()
            if choices:
                preview = option_list(choices, Settings.OPTION_PREVIEW_COUNT)
                return f"dropdown with options: {preview}"
            return 'dropdown selection'
        if field.kind in KIND_DESCRIPTIONS:
            return KIND_DESCRIPTIONS[field.kind]
        return TYPE_DESCRIPTIONS.get(category, 'text input')

    @staticmethod
    def hint(category: SemanticCategory, field: Field) -> str:
        if field.is_enumeration():
            choices = field.choice_options()[:Settings.OPTION_PREVIEW_COUNT]
            if choices:
                return f"Choose from: {option_list(choices)}"
        return CATEGORY_HINTS.get(category, '')

    @staticmethod
    def intro(total: int) -> str:
        plural = '' if total == 1 else 's'
        return f"Starting voice form filling. Found {total} field{plural} to fill."

    @staticmethod
    def announce(position: str, label: str, hint: str) -> str:
        text = f"Field {position}. Please enter your {label}"
        return f"{text}. {hint}" if hint else text

    @staticmethod
    def filled(label: str, value: str, category: SemanticCategory) -> str:
        if category == SemanticCategory.PASSWORD:
            return f"{label} filled successfully."
        return f"{label} filled successfully. {value}"

    @staticmethod
    def no_match(value: str, options: List[FieldOption]) -> str:
        return (
            f'Could not match "{value}". '
            f"Available options are: {option_list(options)}. Please try again."
        )

    @staticmethod
    def confirm(value: str, label: str) -> str:
        return f'Did you say "{value}" for {label}?'

    @staticmethod
    def completed(filled: int, total: int) -> str:
        if filled == total:
            return (
                "Congratulations! Form filling has been completed successfully. "
                "All fields have been filled."
            )
        return (
            f"Form filling has been completed. {filled} of {total} fields were filled. "
            "Please review the skipped fields."
        )
