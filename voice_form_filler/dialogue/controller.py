"""
Dialogue Controller - the per-field voice form filling state machine.

Idle -> Enumerating -> for each field:
    Announcing -> Listening -> [Confirming] -> Committing -> next field
-> Completed | Aborted

Recognition errors, rejected confirmations and unmatched options all count
against the same retry budget, so every field terminates: it is either
filled, skipped or marked failed, and the session moves on.
"""

import asyncio
import weakref
from typing import List, Optional

from ..analyzer.field_classifier import FieldClassifier
from ..analyzer.inventory_builder import FieldInventoryBuilder
from ..analyzer.transcript_normalizer import TranscriptNormalizer
from ..analyzer.value_committer import ValueCommitter
from ..browser.host import FormHost
from ..config.settings import Settings, TransitionDelays
from ..errors import (
    HostError,
    HostMutationFailure,
    NoFillableFields,
    RecognitionError,
    RecognitionTimeout,
    SessionAlreadyActive,
)
from ..models.dialogue import (
    DialogueState,
    FieldOutcome,
    FieldStatus,
    RecognitionResult,
    SemanticCategory,
    SessionPhase,
    SessionReport,
)
from ..models.field import Field
from ..speech.base import ConfirmationPrompt, SpeechRecognizer, SpeechSynthesizer
from ..utils.logger import logger
from .narrator import Narrator
from .prompts import Prompts


class DialogueController:
    """Drives one voice form filling session over a host page."""

    # One active session per host
    _active_hosts: 'weakref.WeakKeyDictionary[FormHost, DialogueController]' = (
        weakref.WeakKeyDictionary()
    )

    def __init__(
        self,
        host: FormHost,
        recognizer: SpeechRecognizer,
        synthesizer: SpeechSynthesizer,
        prompt: ConfirmationPrompt,
        *,
        confidence_threshold: Optional[float] = None,
        max_retries: Optional[int] = None,
        locale: Optional[str] = None,
        delays: Optional[TransitionDelays] = None,
    ):
        """
        Initialize the controller.

        Args:
            host: Page to fill
            recognizer: Speech-to-text service
            synthesizer: Text-to-speech service
            prompt: Yes/no confirmation for low-confidence results
            confidence_threshold: Results below this (and above 0) are confirmed
            max_retries: Attempts per field before it is skipped
            locale: Recognition locale
            delays: Pauses between transitions (defaults from Settings)
        """
        self.host = host
        self.recognizer = recognizer
        self.prompt = prompt
        self.narrator = Narrator(host, synthesizer)

        self.confidence_threshold = (
            Settings.CONFIDENCE_THRESHOLD if confidence_threshold is None else confidence_threshold
        )
        self.max_retries = Settings.MAX_RETRIES if max_retries is None else max_retries
        self.locale = locale or Settings.LOCALE
        self.delays = delays or TransitionDelays.from_settings()

        self.state = DialogueState()
        self.report = SessionReport()
        self.fields: List[Field] = []

        self._task: Optional[asyncio.Task] = None
        self._stop_requested = False

    @property
    def phase(self) -> SessionPhase:
        return self.state.phase

    def is_active(self) -> bool:
        return self._task is not None

    async def run(self) -> SessionReport:
        """
        Run a complete session.

        Returns:
            SessionReport in phase COMPLETED or ABORTED

        Raises:
            SessionAlreadyActive: a session is already running on this host
        """
        self._acquire()
        self._task = asyncio.current_task()
        self._stop_requested = False
        self.state = DialogueState()
        self.report = SessionReport()
        self.fields = []

        try:
            await self._run_session()
        except asyncio.CancelledError:
            if not self._stop_requested:
                await self._abort_cleanup()
                raise
            task = asyncio.current_task()
            if hasattr(task, 'uncancel'):
                task.uncancel()
            await self._abort_cleanup()
        except Exception as e:
            logger.error(f"Session failed: {e}")
            self.report.error = e
            await self._abort_cleanup()
            raise
        finally:
            self._task = None
            self._release()

        return self.report

    async def stop(self):
        """Halt the session from any state."""
        task = self._task
        if task is None:
            return

        logger.warning("Stop requested")
        self._stop_requested = True
        await self.recognizer.cancel()
        await self.narrator.cancel()
        # The session may have ended while the services were cancelling
        if not task.done():
            task.cancel()

    async def submit(self) -> bool:
        """Submit the filled form. Only valid after completion."""
        if self.state.phase != SessionPhase.COMPLETED or not self.fields:
            return False

        submitted = await self.host.submit(self.fields[0])
        if submitted:
            await self.narrator.status("Form submitted successfully!")
            await self.narrator.say("Form has been submitted successfully. Thank you!")
        else:
            await self.narrator.status("No form container found to submit.")
            await self.narrator.say("Could not find a form to submit. Please submit manually.")
        return submitted

    async def decline_submit(self):
        await self.narrator.say("Form ready for review. You can submit it manually when ready.")

    # ------------------------------------------------------------------
    # Session flow
    # ------------------------------------------------------------------

    async def _run_session(self):
        self._enter(SessionPhase.ENUMERATING)

        try:
            root = await self.host.snapshot()
        except HostError as e:
            logger.error(f"Could not read page: {e}")
            self.report.error = e
            await self.narrator.status("Could not read this page.")
            self._enter(SessionPhase.ABORTED)
            return

        self.fields = FieldInventoryBuilder.build(root)
        if not self.fields:
            error = NoFillableFields()
            self.report.error = error
            await self.narrator.status(str(error))
            await self.narrator.say(str(error))
            self._enter(SessionPhase.ABORTED)
            return

        total = len(self.fields)
        self.report.total_fields = total
        self.state.current_index = 0

        await self.narrator.status(f"Found {total} field{'' if total == 1 else 's'}")
        await self.narrator.say(Prompts.intro(total))
        await self._pause(self.delays.intro)

        while self.state.current_index < total:
            await self._fill_field(self.fields[self.state.current_index])

        await self._complete()

    async def _fill_field(self, field: Field):
        index = self.state.current_index
        category, label = FieldClassifier.classify(field)
        label = label or f"Field {index + 1}"

        self._enter(SessionPhase.ANNOUNCING, index)
        self.state.retry_count = 0
        await self._announce(field, category, label)

        while True:
            await self._pause(self.delays.listen)
            self._enter(SessionPhase.LISTENING, index)
            await self.narrator.status(
                f"Listening for: {label} ({Prompts.describe(category, field)})"
            )

            try:
                result = await self._listen()
            except RecognitionTimeout as e:
                logger.warning(f"No speech for {label}: {e.code}")
                if await self._retry(
                    "No speech detected.",
                    f"No speech detected. Please try again for {label}",
                    self.delays.retry,
                ):
                    continue
                await self._skip(field, category, label)
                return
            except RecognitionError as e:
                logger.warning(f"Recognition error for {label}: {e.code}")
                if await self._retry(
                    "Voice recognition error.",
                    "Voice recognition error. Please try again.",
                    self.delays.error_retry,
                ):
                    continue
                await self._skip(field, category, label)
                return

            value = TranscriptNormalizer.normalize(result.transcript, category)
            logger.debug(f"Transcript {result.transcript!r} -> {value!r} ({result.confidence})")

            if result.has_confidence() and result.confidence < self.confidence_threshold:
                self._enter(SessionPhase.CONFIRMING, index)
                accepted = await self._confirm(value, label)
                if not accepted:
                    if await self._retry("", f"Please try again for {label}", self.delays.retry):
                        continue
                    await self._skip(field, category, label)
                    return

            self._enter(SessionPhase.COMMITTING, index)
            try:
                commit = await ValueCommitter.commit(field, value, self.host)
            except HostMutationFailure as e:
                await self._fail(field, category, label, e)
                return

            if commit.ok:
                await self._filled(field, category, label, commit.value)
                return

            message = Prompts.no_match(value, field.choice_options() or commit.options)
            await self.narrator.status(message)
            await self.narrator.say(message)
            if await self._retry("", f"Please choose an option for {label}", self.delays.no_match):
                continue
            await self._skip(field, category, label)
            return

    async def _announce(self, field: Field, category: SemanticCategory, label: str):
        position = f"{self.state.current_index + 1} of {len(self.fields)}"
        await self.host.highlight(field)
        await self.narrator.status(f"Field {position}: {label}")
        await self.narrator.say(Prompts.announce(position, label, Prompts.hint(category, field)))

    async def _listen(self) -> RecognitionResult:
        self.state.is_listening = True
        try:
            alternatives = await self.recognizer.listen(self.locale)
        except RecognitionError:
            raise
        except Exception as e:
            raise RecognitionError('engine', f"Recognizer failed: {e}") from e
        finally:
            self.state.is_listening = False

        best = RecognitionResult.best(alternatives)
        if best is None or not best.transcript.strip():
            raise RecognitionTimeout('no-speech')
        return best

    async def _confirm(self, value: str, label: str) -> bool:
        """Ask for confirmation. A prompt that fails counts as a rejection."""
        try:
            return await self.prompt.confirm(Prompts.confirm(value, label))
        except Exception as e:
            logger.warning(f"Confirmation failed for {label}: {e}")
            return False

    async def _retry(self, status: str, speech: str, delay: float) -> bool:
        """Consume one retry. Returns False when the field's budget is spent."""
        self.state.retry_count += 1
        if self.state.retry_count >= self.max_retries:
            return False

        counter = f"Retry {self.state.retry_count}/{self.max_retries}"
        await self.narrator.status(f"{status} {counter}".strip())
        await self.narrator.say(speech)
        await self._pause(delay)
        return True

    async def _filled(self, field: Field, category: SemanticCategory, label: str, value: str):
        await self.host.clear_highlight(field)
        shown = '*' * len(value) if category == SemanticCategory.PASSWORD else value
        await self.narrator.status(f"Filled {label} with: {shown}")
        await self.narrator.say(Prompts.filled(label, value, category))
        self._record(label, category, FieldStatus.FILLED, value)
        await self._pause(self.delays.advance)

    async def _skip(self, field: Field, category: SemanticCategory, label: str):
        await self.host.clear_highlight(field)
        await self.narrator.status(f"Skipped: {label}")
        await self.narrator.say(f"Skipped {label}. Moving to next field.")
        self._record(label, category, FieldStatus.SKIPPED)
        await self._pause(self.delays.skip)

    async def _fail(self, field: Field, category: SemanticCategory, label: str, error: Exception):
        logger.error(f"Could not set {label}: {error}")
        await self.host.clear_highlight(field)
        await self.narrator.status(f"Could not fill {label}: {error}")
        await self.narrator.say(f"Could not fill {label}. Moving to next field.")
        self._record(label, category, FieldStatus.FAILED)
        await self._pause(self.delays.skip)

    async def _complete(self):
        filled = len(self.report.filled)
        total = len(self.fields)
        await self.narrator.status("Form filling completed successfully!")
        await self.narrator.say(Prompts.completed(filled, total))
        await self.recognizer.close()

        self._enter(SessionPhase.COMPLETED)
        logger.metric("Fields filled", filled)
        logger.metric("Fields skipped", total - filled)

    async def _abort_cleanup(self):
        try:
            if self.state.current_index < len(self.fields):
                await self.host.clear_highlight(self.fields[self.state.current_index])
        finally:
            self.state.is_listening = False
            self._enter(SessionPhase.ABORTED)
            await self.recognizer.close()
            logger.warning("Session aborted")

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def _record(self, label: str, category: SemanticCategory, status: FieldStatus,
                value: Optional[str] = None):
        """Record a field outcome and advance to the next field."""
        self.report.outcomes.append(FieldOutcome(
            index=self.state.current_index,
            label=label,
            category=category,
            status=status,
            value=value,
        ))
        self.state.current_index += 1

    def _enter(self, phase: SessionPhase, index: Optional[int] = None):
        if self.state.phase.is_terminal() and phase.is_terminal():
            return
        self.state.phase = phase
        self.report.phase = phase
        self.report.transitions.append((phase, index))
        logger.phase(phase.value, f"retry={self.state.retry_count}", index)

    async def _pause(self, seconds: float):
        if seconds > 0:
            await asyncio.sleep(seconds)

    def _acquire(self):
        if self._task is not None:
            raise SessionAlreadyActive()
        owner = DialogueController._active_hosts.get(self.host)
        if owner is not None and owner is not self:
            raise SessionAlreadyActive()
        DialogueController._active_hosts[self.host] = self

    def _release(self):
        if DialogueController._active_hosts.get(self.host) is self:
            del DialogueController._active_hosts[self.host]
