"""
Tests for building the field inventory from a document tree.
"""

from voice_form_filler.analyzer.field_classifier import FieldClassifier
from voice_form_filler.analyzer.inventory_builder import FieldInventoryBuilder
from voice_form_filler.models.document import DocumentNode
from voice_form_filler.models.field import FieldKind
from voice_form_filler.tests.fakes import node


def test_inventory_follows_document_order(signup_page):
    fields = FieldInventoryBuilder.build(signup_page)

    assert [f.name for f in fields] == ['full_name', 'email', 'phone']
    assert fields[0].label_text == 'Full Name:'
    assert fields[1].input_type == 'email'
    assert fields[2].preceding_text == 'Phone'


def test_nested_containers_are_walked_depth_first():
    root = node(
        'body',
        node('div', node('div', node('input', name='a')), node('input', name='b')),
        node('input', name='c'),
    )

    fields = FieldInventoryBuilder.build(root)

    assert [f.name for f in fields] == ['a', 'b', 'c']


def test_unfillable_controls_are_filtered():
    root = node(
        'form',
        node('input', name='disabled', disabled=True),
        node('input', name='token', type_='hidden'),
        node('input', name='go', type_='submit'),
        node('input', name='press', type_='button'),
        node('input', name='flat', height=0),
        node('input', name='gone', display='none'),
        node('input', name='invisible', visibility='hidden'),
        node('input', name='hidden_attr', hidden=''),
        node('div', node('input', name='inside_hidden'), display='none'),
        node('button', text='Send'),
        node('input', name='kept'),
    )

    fields = FieldInventoryBuilder.build(root)

    assert [f.name for f in fields] == ['kept']


def test_ignored_subtrees_are_skipped():
    root = node(
        'body',
        node('template', node('input', name='template_field')),
        node('textarea', name='bio'),
    )

    fields = FieldInventoryBuilder.build(root)

    assert [f.name for f in fields] == ['bio']


def test_field_kinds_and_options():
    root = node(
        'form',
        node('select', name='color', options=[('', 'Pick one'), ('red', 'Red')]),
        node('textarea', name='bio'),
        node('input', name='qty', type_='number'),
        node('input', name='secret', type_='password'),
        node('input', name='agree', type_='checkbox'),
        node('input', name='when', type_='date'),
    )

    fields = FieldInventoryBuilder.build(root)
    kinds = {f.name: f.kind for f in fields}

    assert kinds == {
        'color': FieldKind.ENUMERATION,
        'bio': FieldKind.MULTILINE,
        'qty': FieldKind.NUMERIC,
        'secret': FieldKind.PASSWORD,
        'agree': FieldKind.CHECKBOX,
        'when': FieldKind.OTHER,
    }
    color = fields[0]
    assert color.input_type == 'select-one'
    assert [o.text for o in color.options] == ['Pick one', 'Red']
    assert [o.value for o in color.choice_options()] == ['red']
    assert fields[1].options is None


def test_enclosing_label_excludes_current_value():
    root = node('form', node('label', node('input', name='city', value='Paris'), text='City Paris'))

    fields = FieldInventoryBuilder.build(root)

    assert fields[0].enclosing_label_text == 'City'
    assert fields[0].value == 'Paris'


def test_empty_page_gives_empty_inventory():
    root = node('body', node('p', text='Nothing to fill'), node('input', type_='hidden'))

    assert FieldInventoryBuilder.build(root) == []


def test_snapshot_dictionary_builds_tree():
    data = {
        'tagName': 'BODY',
        'width': 800, 'height': 600,
        'children': [
            {
                'tagName': 'select', 'attributes': {'name': 'size'},
                'width': 100, 'height': 20, 'selector': '[data-voice-field="0"]',
                'options': [{'value': 's', 'text': ' Small '}, {'value': 'l', 'label': 'Large'}],
            },
        ],
    }

    tree = DocumentNode.from_dict(data)
    fields = FieldInventoryBuilder.build(tree)

    assert tree.tag_name == 'body'
    assert fields[0].selector == '[data-voice-field="0"]'
    assert [o.text for o in fields[0].options] == ['Small', 'Large']
    assert fields[0].node.parent is tree


def test_mixed_label_text_keeps_document_order():
    data = {
        'tagName': 'form',
        'children': [
            {'tagName': 'label', 'attributes': {'for': 'n'}, 'children': [
                {'tagName': '#text', 'text': 'Name'},
                {'tagName': 'b', 'children': [{'tagName': '#text', 'text': '*'}]},
                {'tagName': '#text', 'text': ':'},
            ]},
            {'tagName': '#text', 'text': 'hint'},
            {'tagName': 'input', 'attributes': {'id': 'n'}, 'width': 100, 'height': 20},
        ],
    }

    fields = FieldInventoryBuilder.build(DocumentNode.from_dict(data))

    assert fields[0].label_text == 'Name * :'
    assert fields[0].preceding_text == 'Name * :'
    assert FieldClassifier.clean_label(fields[0].label_text) == 'Name'
