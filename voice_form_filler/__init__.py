"""Voice Form Filler - fill web forms one field at a time by voice."""

__version__ = "1.0.0"
