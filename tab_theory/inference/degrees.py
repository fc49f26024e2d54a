"""Scale degrees - Place notes on the degrees of a detected key.

Degree labels follow the major scale pattern (Tone-Tone-Semitone-Tone-
Tone-Tone-Semitone) for both modes; only the pitch offsets used to place
notes differ between major and natural minor.

Notes outside the scale are not given altered labels (no "bIII"): they
collapse onto the first scale degree within one semitone.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple

from ..core import (
    FLAT_KEYS,
    MAJOR_SCALE,
    MINOR_SCALE,
    PITCH_NAMES,
    PITCH_NAMES_FLAT,
    note_name_to_pitch_class,
)
from .key import KeyInfo

UNKNOWN_DEGREE = "?"

# Largest distance in semitones for snapping an altered note to a degree
NEAREST_DEGREE_TOLERANCE = 1


@dataclass(frozen=True)
class ScaleDegree:
    """One degree of the diatonic scale."""

    degree: int  # 1-7
    short: str  # T, S, M, SD, D, SM, L
    english_full: str
    russian_full: str
    interval: str  # Step to the next degree, "T" = tone, "S" = semitone
    interval_english: str

    @property
    def roman(self) -> str:
        return ROMAN_NUMERALS[self.short]


SCALE_DEGREES: Tuple[ScaleDegree, ...] = (
    ScaleDegree(1, "T", "Tonic", "Тоника", "T", "Tone"),
    ScaleDegree(2, "S", "Supertonic", "Супертоника", "T", "Tone"),
    ScaleDegree(3, "M", "Mediant", "Медианта", "S", "Semitone"),
    ScaleDegree(4, "SD", "Subdominant", "Субдоминанта", "T", "Tone"),
    ScaleDegree(5, "D", "Dominant", "Доминанта", "T", "Tone"),
    ScaleDegree(6, "SM", "Submediant", "Субмедианта", "T", "Tone"),
    ScaleDegree(7, "L", "Leading tone", "Вводный тон", "S", "Semitone"),
)

ROMAN_NUMERALS: Mapping[str, str] = MappingProxyType({
    "T": "I",
    "S": "II",
    "M": "III",
    "SD": "IV",
    "D": "V",
    "SM": "VI",
    "L": "VII",
})

SCALE_OFFSETS: Mapping[str, Tuple[int, ...]] = MappingProxyType({
    "major": MAJOR_SCALE,
    "minor": MINOR_SCALE,
})


def get_scale_degrees() -> Tuple[ScaleDegree, ...]:
    """The seven scale degree descriptors."""
    return SCALE_DEGREES


def scale_offsets(mode: str) -> Tuple[int, ...]:
    """Semitone offsets from the tonic; anything but "major" is natural minor."""
    return SCALE_OFFSETS.get(mode, MINOR_SCALE)


def uses_flats(key_info: KeyInfo) -> bool:
    """Whether the key's scale is spelled with flats (decided by tonic only)."""
    return key_info.root in FLAT_KEYS


def get_scale_notes(key_info: KeyInfo) -> List[str]:
    """
    Note names of the key's scale.

    Args:
        key_info: Detected or chosen key

    Returns:
        Seven note names starting at the tonic, e.g. ["F", "G", "A", "Bb", ...]
    """
    tonic = note_name_to_pitch_class(key_info.root) % 12
    names = PITCH_NAMES_FLAT if uses_flats(key_info) else PITCH_NAMES
    return [names[(tonic + offset) % 12] for offset in scale_offsets(key_info.mode)]


def get_scale_degree_for_note(pitch: int, key_info: KeyInfo) -> str:
    """
    Scale degree code of a MIDI pitch in a key.

    Out-of-scale notes take the code of the first degree within
    NEAREST_DEGREE_TOLERANCE semitones.

    Returns:
        Degree code (T, S, M, SD, D, SM, L) or "?" when nothing is close
    """
    tonic = note_name_to_pitch_class(key_info.root) % 12
    offsets = scale_offsets(key_info.mode)
    interval = (pitch % 12 - tonic + 12) % 12

    if interval in offsets:
        return SCALE_DEGREES[offsets.index(interval)].short

    for i, offset in enumerate(offsets):
        if abs(offset - interval) <= NEAREST_DEGREE_TOLERANCE:
            return SCALE_DEGREES[i].short

    return UNKNOWN_DEGREE


def convert_to_roman_numeral(code: str) -> str:
    """Roman numeral for a degree code; unknown codes pass through."""
    return ROMAN_NUMERALS.get(code, code)
