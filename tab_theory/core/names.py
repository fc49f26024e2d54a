"""Note naming - MIDI pitch to letter names in several naming systems.

Names come straight from fixed lookup tables; there is no spelling
inference. Sharp or flat spelling is chosen by the caller (or by the key's
tonic, see ``inference.degrees``), never per note.
"""

from types import MappingProxyType
from typing import Sequence

from .constants import NOTE_NAME_TABLES, STANDARD_TUNING

# Sharp and flat English spellings to pitch class
_NAME_TO_PITCH_CLASS = MappingProxyType({
    "C": 0, "C#": 1, "Db": 1,
    "D": 2, "D#": 3, "Eb": 3,
    "E": 4,
    "F": 5, "F#": 6, "Gb": 6,
    "G": 7, "G#": 8, "Ab": 8,
    "A": 9, "A#": 10, "Bb": 10,
    "B": 11,
})

NOTE_NAME_FORMATS = tuple(NOTE_NAME_TABLES)


def get_name_table(fmt: str = "english") -> Sequence[str]:
    """Return the 12-entry name table for a naming format.

    Raises:
        ValueError: If the format is unknown
    """
    try:
        return NOTE_NAME_TABLES[fmt]
    except KeyError:
        raise ValueError(
            f"Unknown note name format: {fmt!r}. Supported: {NOTE_NAME_FORMATS}"
        ) from None


def midi_to_note_name(pitch: int, fmt: str = "english") -> str:
    """Convert a MIDI pitch to a note name without octave ('C#', 'Sol')."""
    return get_name_table(fmt)[pitch % 12]


def midi_to_octave(pitch: int) -> int:
    """Octave number of a MIDI pitch (60 -> 4, 0 -> -1)."""
    return pitch // 12 - 1


def midi_to_note_name_with_octave(
    pitch: int,
    include_octave: bool = True,
    fmt: str = "english",
) -> str:
    """
    Convert a MIDI pitch to a note name with octave.

    Args:
        pitch: MIDI pitch (0-127)
        include_octave: Append the octave number
        fmt: Naming format (see NOTE_NAME_FORMATS)

    Returns:
        Note name, e.g. "C4" or "G#3"
    """
    name = midi_to_note_name(pitch, fmt)
    if not include_octave:
        return name
    return f"{name}{midi_to_octave(pitch)}"


def note_name_to_pitch_class(name: str) -> int:
    """Pitch class of an English note name. Unknown names map to C (0)."""
    return _NAME_TO_PITCH_CLASS.get(name, 0)


def is_note_name(name: str) -> bool:
    """Whether a name is a sharp or flat English note name."""
    return name in _NAME_TO_PITCH_CLASS


def fret_to_pitch(fret: int, string_index: int, tuning: Sequence[int]) -> int:
    """
    MIDI pitch of a fretted note.

    Args:
        fret: Fret number (0 = open string)
        string_index: 0-based string index into the tuning
        tuning: Base pitch per string, thinnest string first

    Raises:
        IndexError: If the string exists in neither tuning nor standard tuning
    """
    if string_index < 0:
        raise IndexError(f"String index must be non-negative: {string_index}")
    if string_index < len(tuning):
        base = tuning[string_index]
    else:
        base = STANDARD_TUNING[string_index]
    return base + fret


def fret_to_note_name(
    fret: int,
    string_index: int,
    tuning: Sequence[int],
    fmt: str = "english",
) -> str:
    """Note name of a fretted note."""
    return midi_to_note_name(fret_to_pitch(fret, string_index, tuning), fmt)
