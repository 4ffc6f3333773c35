"""
Dialogue models - Session state, recognition results and outcomes.
"""

from dataclasses import dataclass, asdict, field as dataclass_field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .field import FieldOption


class SemanticCategory(str, Enum):
    """Heuristic purpose of a field. Definition order is match priority."""

    EMAIL = "email"
    PHONE = "phone"
    NAME = "name"
    ADDRESS = "address"
    DATE = "date"
    PASSWORD = "password"
    AGE = "age"
    GENDER = "gender"
    COMPANY = "company"
    TITLE = "title"
    WEBSITE = "website"
    COUNTRY = "country"
    STATE = "state"
    COMMENT = "comment"
    TEXT = "text"


class SessionPhase(str, Enum):
    """States of the dialogue controller."""

    IDLE = "idle"
    ENUMERATING = "enumerating"
    ANNOUNCING = "announcing"
    LISTENING = "listening"
    CONFIRMING = "confirming"
    COMMITTING = "committing"
    COMPLETED = "completed"
    ABORTED = "aborted"

    def is_terminal(self) -> bool:
        return self in (SessionPhase.COMPLETED, SessionPhase.ABORTED)


@dataclass
class DialogueState:
    """Per-session mutable record, owned by the controller."""

    current_index: int = 0
    retry_count: int = 0
    is_listening: bool = False
    phase: SessionPhase = SessionPhase.IDLE


@dataclass
class RecognitionResult:
    """One recognized alternative. Confidence None or 0 means unreported."""

    transcript: str
    confidence: Optional[float] = None

    def has_confidence(self) -> bool:
        return bool(self.confidence)

    @staticmethod
    def best(alternatives: Sequence['RecognitionResult']) -> Optional['RecognitionResult']:
        """
        Pick the highest-confidence alternative.

        Falls back to the first alternative when none reports a confidence.

        Args:
            alternatives: Ranked alternatives from one listen attempt

        Returns:
            Selected alternative, or None when there is nothing to pick
        """
        if not alternatives:
            return None

        best = None
        for alternative in alternatives:
            if alternative.has_confidence() and (
                best is None or alternative.confidence > best.confidence
            ):
                best = alternative

        return best or alternatives[0]


class CommitStatus(str, Enum):
    COMMITTED = "committed"
    NO_MATCHING_OPTION = "no_matching_option"


@dataclass
class CommitResult:
    """Outcome of writing a value into a field."""

    status: CommitStatus
    value: Optional[str] = None
    matched_option: Optional[FieldOption] = None
    options: List[FieldOption] = dataclass_field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == CommitStatus.COMMITTED


class FieldStatus(str, Enum):
    FILLED = "filled"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class FieldOutcome:
    """What happened to one field during a session."""

    index: int
    label: str
    category: SemanticCategory
    status: FieldStatus
    value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['category'] = self.category.value
        data['status'] = self.status.value
        return data


@dataclass
class SessionReport:
    """Result of one voice form filling session."""

    phase: SessionPhase = SessionPhase.IDLE
    total_fields: int = 0
    outcomes: List[FieldOutcome] = dataclass_field(default_factory=list)
    transitions: List[Tuple[SessionPhase, Optional[int]]] = dataclass_field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def filled(self) -> List[FieldOutcome]:
        return [o for o in self.outcomes if o.status == FieldStatus.FILLED]

    @property
    def unresolved(self) -> List[FieldOutcome]:
        return [o for o in self.outcomes if o.status != FieldStatus.FILLED]

    def phases(self) -> List[SessionPhase]:
        """Phase sequence without field indices."""
        return [phase for phase, _ in self.transitions]

    def summary(self) -> str:
        """Get a human-readable summary."""
        return (
            f"Voice Form Filling Summary\n"
            f"{'='*50}\n"
            f"Result: {self.phase.value}\n"
            f"Total Fields: {self.total_fields}\n"
            f"Filled: {len(self.filled)}\n"
            f"Skipped: {len(self.unresolved)}\n"
            f"{'='*50}\n"
        )
