"""Control API for Voice Form Filler."""
