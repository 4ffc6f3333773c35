"""
Tests for the speech adapters that run without audio hardware.
"""

import asyncio
import threading

import pytest
import pyttsx3

from voice_form_filler.models.dialogue import RecognitionResult
from voice_form_filler.speech.console_prompt import ConsolePrompt
from voice_form_filler.speech.google_recognizer import GoogleSpeechRecognizer
from voice_form_filler.speech.pyttsx3_synthesizer import Pyttsx3Synthesizer


def test_parse_response_keeps_ranked_alternatives():
    response = {
        'alternative': [
            {'transcript': 'john smith', 'confidence': 0.87},
            {'transcript': 'jon smith'},
            {'transcript': '   '},
        ],
        'final': True,
    }

    alternatives = GoogleSpeechRecognizer.parse_response(response)

    assert alternatives == [
        RecognitionResult('john smith', 0.87),
        RecognitionResult('jon smith', None),
    ]


@pytest.mark.parametrize("response", [[], None, {}, {'alternative': []}])
def test_parse_response_without_speech(response):
    assert GoogleSpeechRecognizer.parse_response(response) == []


def test_best_prefers_highest_reported_confidence():
    alternatives = [
        RecognitionResult('first', None),
        RecognitionResult('second', 0.4),
        RecognitionResult('third', 0.8),
    ]

    assert RecognitionResult.best(alternatives).transcript == 'third'


def test_best_falls_back_to_first_alternative():
    alternatives = [RecognitionResult('first', 0.0), RecognitionResult('second')]

    assert RecognitionResult.best(alternatives).transcript == 'first'
    assert RecognitionResult.best([]) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("answer,expected", [
    ("y", True),
    (" Yes ", True),
    ("ok", True),
    ("n", False),
    ("", False),
])
async def test_console_prompt(monkeypatch, answer, expected):
    questions = []

    def fake_input(prompt):
        questions.append(prompt)
        return answer

    monkeypatch.setattr('builtins.input', fake_input)

    assert await ConsolePrompt().confirm("Did you say it?") is expected
    assert "Did you say it?" in questions[0]


class FakeEngine:
    """Stands in for a pyttsx3 driver; records which thread touches it."""

    def __init__(self):
        self.callbacks = {}
        self.spoken = []
        self.stops = []
        self.threads = set()
        self.word_reached = threading.Event()

    def setProperty(self, name, value):
        pass

    def getProperty(self, name):
        return []

    def connect(self, topic, callback):
        self.callbacks[topic] = callback

    def say(self, text):
        self.threads.add(threading.current_thread().name)
        self.spoken.append(text)

    def stop(self):
        self.stops.append(threading.current_thread().name)

    def runAndWait(self):
        self.word_reached.wait(timeout=5)
        self.callbacks['started-word']('utterance', 0, 5)


@pytest.mark.asyncio
async def test_cancel_stops_engine_on_its_own_thread(monkeypatch):
    engine = FakeEngine()
    monkeypatch.setattr(pyttsx3, 'init', lambda: engine)
    synthesizer = Pyttsx3Synthesizer()

    speaking = asyncio.create_task(synthesizer.speak("hello there"))
    for _ in range(500):
        if engine.spoken:
            break
        await asyncio.sleep(0.01)

    await synthesizer.cancel()
    assert engine.stops == [next(iter(engine.threads))]

    engine.word_reached.set()
    await speaking
    synthesizer.shutdown()

    assert engine.spoken == ["hello there"]
    assert len(engine.stops) == 2
    assert all(name.startswith("tts") for name in engine.stops)


@pytest.mark.asyncio
async def test_next_utterance_is_not_interrupted(monkeypatch):
    engine = FakeEngine()
    engine.word_reached.set()
    monkeypatch.setattr(pyttsx3, 'init', lambda: engine)
    synthesizer = Pyttsx3Synthesizer()

    await synthesizer.cancel()
    await synthesizer.speak("first")
    synthesizer.shutdown()

    # Only the reset before speaking
    assert len(engine.stops) == 1
