"""Analyzer package for Voice Form Filler."""

from .inventory_builder import FieldInventoryBuilder
from .field_classifier import FieldClassifier
from .transcript_normalizer import TranscriptNormalizer
from .value_committer import ValueCommitter

__all__ = ['FieldInventoryBuilder', 'FieldClassifier', 'TranscriptNormalizer', 'ValueCommitter']
