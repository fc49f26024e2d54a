"""Output layer - Display labels for score notes."""

from .labels import KeyCache, NoteLabeler

__all__ = [
    "KeyCache",
    "NoteLabeler",
]
