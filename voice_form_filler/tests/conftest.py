import pytest

from voice_form_filler.browser.host import DocumentHost
from voice_form_filler.config.settings import TransitionDelays
from voice_form_filler.dialogue.controller import DialogueController
from voice_form_filler.tests.fakes import (
    RecordingSynthesizer,
    ScriptedPrompt,
    ScriptedRecognizer,
    node,
)


@pytest.fixture
def signup_page():
    """A small signup form with a few fields that must be skipped."""
    return node(
        'body',
        node('h1', text='Create account'),
        node(
            'form',
            node('label', text='Full Name:', for_='full_name'),
            node('input', id='full_name', name='full_name', type_='text'),
            node('input', name='csrf_token', type_='hidden', width=0, height=0),
            node('label', text='Email Address *', for_='email'),
            node('input', id='email', name='email', type_='email'),
            node('span', text='Phone'),
            node('input', name='phone', type_='tel'),
            node('input', type_='submit', value='Sign up'),
            id='signup',
        ),
    )


@pytest.fixture
def make_controller():
    """Build a controller over a tree with scripted speech and no pauses."""

    def _make(root, script=(), answers=(), recognizer=None, prompt=None,
              synthesizer=None, host=None, delays=None, **kwargs):
        controller = DialogueController(
            host or DocumentHost(root),
            recognizer or ScriptedRecognizer(script),
            synthesizer or RecordingSynthesizer(),
            prompt or ScriptedPrompt(answers),
            delays=delays or TransitionDelays.none(),
            **kwargs,
        )
        return controller

    return _make
