"""Core types, constants and note naming for Tab Theory."""

from .note import Note
from .score import Score, Track, Staff, Bar, Voice, Beat
from .constants import (
    PITCH_NAMES,
    PITCH_NAMES_FLAT,
    NOTE_NAME_TABLES,
    FLAT_KEYS,
    STANDARD_TUNING,
    DROP_D_TUNING,
    HALF_STEP_DOWN_TUNING,
    WHOLE_STEP_DOWN_TUNING,
    MAJOR_SCALE,
    MINOR_SCALE,
)
from .names import (
    NOTE_NAME_FORMATS,
    get_name_table,
    midi_to_note_name,
    midi_to_octave,
    midi_to_note_name_with_octave,
    note_name_to_pitch_class,
    is_note_name,
    fret_to_pitch,
    fret_to_note_name,
)

__all__ = [
    # Types
    "Note",
    "Score",
    "Track",
    "Staff",
    "Bar",
    "Voice",
    "Beat",
    # Constants
    "PITCH_NAMES",
    "PITCH_NAMES_FLAT",
    "NOTE_NAME_TABLES",
    "FLAT_KEYS",
    "STANDARD_TUNING",
    "DROP_D_TUNING",
    "HALF_STEP_DOWN_TUNING",
    "WHOLE_STEP_DOWN_TUNING",
    "MAJOR_SCALE",
    "MINOR_SCALE",
    # Naming
    "NOTE_NAME_FORMATS",
    "get_name_table",
    "midi_to_note_name",
    "midi_to_octave",
    "midi_to_note_name_with_octave",
    "note_name_to_pitch_class",
    "is_note_name",
    "fret_to_pitch",
    "fret_to_note_name",
]
