"""Data models for Voice Form Filler."""

from .field import Field, FieldKind, FieldOption
from .document import DocumentNode
from .dialogue import (
    CommitResult,
    CommitStatus,
    DialogueState,
    FieldOutcome,
    FieldStatus,
    RecognitionResult,
    SemanticCategory,
    SessionPhase,
    SessionReport,
)

__all__ = [
    'Field', 'FieldKind', 'FieldOption', 'DocumentNode',
    'CommitResult', 'CommitStatus', 'DialogueState', 'FieldOutcome',
    'FieldStatus', 'RecognitionResult', 'SemanticCategory', 'SessionPhase',
    'SessionReport',
]
