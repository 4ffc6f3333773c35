"""
Tests for label resolution and semantic category detection.
"""

import pytest

from voice_form_filler.analyzer.field_classifier import FieldClassifier
from voice_form_filler.models.dialogue import SemanticCategory
from voice_form_filler.models.field import Field, FieldKind


def make_field(**kwargs) -> Field:
    kwargs.setdefault('tag_name', 'input')
    kwargs.setdefault('input_type', 'text')
    return Field(**kwargs)


def test_label_resolution_order():
    field = make_field(
        label_text='Associated',
        enclosing_label_text='Enclosing',
        preceding_text='Preceding',
        placeholder='Placeholder',
        name='the_name',
    )
    assert FieldClassifier.resolve_label(field) == 'Associated'

    field.label_text = None
    assert FieldClassifier.resolve_label(field) == 'Enclosing'

    field.enclosing_label_text = None
    assert FieldClassifier.resolve_label(field) == 'Preceding'

    field.preceding_text = None
    assert FieldClassifier.resolve_label(field) == 'Placeholder'

    field.placeholder = None
    assert FieldClassifier.resolve_label(field) == 'The Name'

    field.name = None
    assert FieldClassifier.resolve_label(field) == ''


def test_name_is_deslugified():
    assert FieldClassifier.deslugify('first_name') == 'First Name'
    assert FieldClassifier.deslugify('zip-code') == 'Zip Code'


@pytest.mark.parametrize('raw, cleaned', [
    ('Full Name:', 'Full Name'),
    ('Email Address *', 'Email Address'),
    ('Enter your city', 'your city'),
    ('Type message here', 'message'),
    ('Comments  \n below', 'Comments'),
    ('input Company:*', 'Company'),
])
def test_clean_label(raw, cleaned):
    assert FieldClassifier.clean_label(raw) == cleaned


def test_pattern_table_priority_order():
    assert list(SemanticCategory)[:6] == [
        SemanticCategory.EMAIL,
        SemanticCategory.PHONE,
        SemanticCategory.NAME,
        SemanticCategory.ADDRESS,
        SemanticCategory.DATE,
        SemanticCategory.PASSWORD,
    ]
    assert list(SemanticCategory)[-1] == SemanticCategory.TEXT


def test_email_wins_over_name():
    field = make_field(name='user_name', label_text='Your email')

    category, label = FieldClassifier.classify(field)

    assert category == SemanticCategory.EMAIL
    assert label == 'Your email'


def test_contact_keyword_resolves_to_email_before_phone():
    field = make_field(name='contact')

    category, _ = FieldClassifier.classify(field)

    assert category == SemanticCategory.EMAIL


@pytest.mark.parametrize('kwargs, expected', [
    ({'input_type': 'tel', 'name': 'x'}, SemanticCategory.PHONE),
    ({'label_text': 'Mobile number'}, SemanticCategory.PHONE),
    ({'id': 'dob'}, SemanticCategory.DATE),
    ({'input_type': 'password', 'name': 'pw'}, SemanticCategory.PASSWORD),
    ({'placeholder': 'Street and house'}, SemanticCategory.ADDRESS),
    ({'name': 'gender'}, SemanticCategory.GENDER),
    ({'label_text': 'Employer'}, SemanticCategory.COMPANY),
    ({'label_text': 'Job'}, SemanticCategory.TITLE),
    ({'name': 'website'}, SemanticCategory.WEBSITE),
    ({'name': 'country'}, SemanticCategory.COUNTRY),
    ({'name': 'province'}, SemanticCategory.STATE),
    ({'tag_name': 'textarea', 'input_type': 'textarea', 'name': 'feedback'}, SemanticCategory.COMMENT),
])
def test_category_keywords(kwargs, expected):
    category, _ = FieldClassifier.classify(make_field(**kwargs))
    assert category == expected


def test_unmatched_metadata_falls_back_to_text():
    field = make_field(name='xyz')

    category, label = FieldClassifier.classify(field)

    assert category == SemanticCategory.TEXT
    assert label == 'Xyz'


def test_field_without_metadata_has_empty_label():
    field = make_field(kind=FieldKind.TEXT)

    category, label = FieldClassifier.classify(field)

    assert category == SemanticCategory.TEXT
    assert label == ''
