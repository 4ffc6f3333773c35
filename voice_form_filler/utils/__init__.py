"""Utility functions for Voice Form Filler."""

from .logger import logger, SessionLogger

__all__ = ['logger', 'SessionLogger']
