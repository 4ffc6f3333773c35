"""Configuration package for Voice Form Filler."""

from .settings import Settings, TransitionDelays

__all__ = ['Settings', 'TransitionDelays']
