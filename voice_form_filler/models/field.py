"""
Field model - Normalized element structure.
Represents a single interactive element eligible for voice input.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .document import DocumentNode


class FieldKind(str, Enum):
    """Native control kinds, treated uniformly by the dialogue."""

    TEXT = "text"
    NUMERIC = "numeric"
    PASSWORD = "password"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    ENUMERATION = "enumeration"
    MULTILINE = "multiline"
    OTHER = "other"

    @classmethod
    def from_control(cls, tag_name: str, input_type: str) -> 'FieldKind':
        """Derive the kind from a tag and its host input type."""
        tag_name = tag_name.lower()
        input_type = (input_type or '').lower()

        if tag_name == 'select':
            return cls.ENUMERATION
        if tag_name == 'textarea':
            return cls.MULTILINE
        if input_type in ('', 'text', 'email', 'tel', 'url', 'search'):
            return cls.TEXT
        if input_type in ('number', 'range'):
            return cls.NUMERIC
        if input_type == 'password':
            return cls.PASSWORD
        if input_type == 'checkbox':
            return cls.CHECKBOX
        if input_type == 'radio':
            return cls.RADIO
        return cls.OTHER


@dataclass(frozen=True)
class FieldOption:
    """One entry of an enumeration field."""

    value: str
    text: str


@dataclass(eq=False)
class Field:
    """Normalized field schema."""

    # Basic properties
    tag_name: str                    # input, textarea, select
    input_type: str                  # text, email, select-one, textarea, ...
    kind: FieldKind = FieldKind.TEXT

    # Identifiers
    name: Optional[str] = None
    id: Optional[str] = None

    # Labels and hints
    placeholder: Optional[str] = None
    label_text: Optional[str] = None            # <label for="id">
    enclosing_label_text: Optional[str] = None  # <label>... <input> ...</label>
    preceding_text: Optional[str] = None        # previous sibling's text

    # Current value
    value: str = ""

    # Select options (value/text pairs)
    options: Optional[List[FieldOption]] = None

    # Host reference
    selector: str = ""
    node: Optional['DocumentNode'] = None

    def is_enumeration(self) -> bool:
        return self.kind == FieldKind.ENUMERATION

    def choice_options(self) -> List[FieldOption]:
        """Options a user can pick; placeholder entries are left out."""
        return [opt for opt in (self.options or []) if opt.value.strip() and opt.text]

    def __repr__(self) -> str:
        """String representation."""
        label = self.label_text or self.placeholder or self.name or self.id or ''
        return f"Field({self.tag_name}[{self.input_type}] - {label})"
