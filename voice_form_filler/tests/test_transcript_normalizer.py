"""
Tests for transcript normalization per category.
"""

import pytest

from voice_form_filler.analyzer.transcript_normalizer import TranscriptNormalizer
from voice_form_filler.models.dialogue import SemanticCategory


def test_phone_keeps_digits_only():
    raw = "five five five, one two three, four five six seven"

    assert TranscriptNormalizer.normalize(raw, SemanticCategory.PHONE) == "5551234567"


def test_phone_normalization_is_idempotent():
    once = TranscriptNormalizer.normalize("call 555 dash 0199", SemanticCategory.PHONE)

    assert once == "5550199"
    assert TranscriptNormalizer.normalize(once, SemanticCategory.PHONE) == once


def test_email_regression_fixture():
    raw = "john dot smith at gmail dot com"

    assert TranscriptNormalizer.normalize(raw, SemanticCategory.EMAIL) == "johndotsmith@gmailcom"


def test_email_collapses_other_providers():
    assert TranscriptNormalizer.normalize("Jane at Yahoo dot net", "email") == "jane@yahoonet"
    assert TranscriptNormalizer.normalize("bob underscore k at outlook com", "email") == "bob_k@outlookcom"


def test_corrections_are_whole_word():
    text = TranscriptNormalizer.apply_corrections("the cat sat at home one day")

    assert text == "the cat sat @ home 1 day"


def test_multi_word_correction():
    assert TranscriptNormalizer.apply_corrections("really question mark") == "really ?"


def test_corrections_can_keep_words():
    assert TranscriptNormalizer.apply_corrections("a dot b", keep={'dot'}) == "a dot b"
    assert TranscriptNormalizer.apply_corrections("a dot b") == "a . b"


@pytest.mark.parametrize('raw, expected', [
    ("january fifteenth", "01 fifteenth"),
    ("Dec 25 2020", "12 25 2020"),
    ("may three", "05 3"),
    ("september 9 nineteen ninety", "09 9 nineteen ninety"),
])
def test_date_month_names(raw, expected):
    assert TranscriptNormalizer.normalize(raw, SemanticCategory.DATE) == expected


def test_date_leaves_words_containing_month_names():
    assert TranscriptNormalizer.normalize("mayday marching", SemanticCategory.DATE) == "mayday marching"


def test_name_is_capitalized():
    assert TranscriptNormalizer.normalize("JOHN  smith", SemanticCategory.NAME) == "John  Smith"


def test_other_categories_only_get_corrections():
    raw = "  Hello comma World exclamation "

    assert TranscriptNormalizer.normalize(raw, SemanticCategory.COMMENT) == "hello , world !"
    assert TranscriptNormalizer.normalize(raw, SemanticCategory.TEXT) == "hello , world !"
