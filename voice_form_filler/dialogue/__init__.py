"""Dialogue package for Voice Form Filler."""

from .controller import DialogueController
from .narrator import Narrator, NarrationEntry
from .prompts import Prompts

__all__ = ['DialogueController', 'Narrator', 'NarrationEntry', 'Prompts']
