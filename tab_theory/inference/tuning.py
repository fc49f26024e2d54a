"""Tuning identification - Name the string tuning of a score.

Staff tunings are stored thinnest string first, the known tuning table is
written thickest string first, so matching compares ``tuning[i]`` with
``known[len - 1 - i]``.
"""

import logging
import warnings
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..core import Score, STANDARD_TUNING, midi_to_note_name

logger = logging.getLogger(__name__)

CUSTOM_TUNING = "Custom"

# Known guitar tunings, thickest string first
KNOWN_TUNINGS: Mapping[str, Tuple[int, ...]] = MappingProxyType({
    "Standard (E)": (40, 45, 50, 55, 59, 64),
    "Drop D": (38, 45, 50, 55, 59, 64),
    "Drop C": (36, 43, 48, 53, 57, 62),
    "Drop B": (35, 42, 47, 52, 56, 61),
    "Open D": (38, 45, 50, 54, 59, 62),
    "Open G": (38, 43, 50, 55, 59, 62),
    "DADGAD": (38, 45, 50, 55, 57, 62),
    "Half-Step Down": (39, 44, 49, 54, 58, 63),
    "Whole-Step Down": (38, 43, 48, 53, 57, 62),
})


@dataclass(frozen=True)
class TuningInfo:
    """Container for tuning identification results."""

    name: str  # Known tuning name or "Custom"
    notes: Tuple[str, ...]  # Note name per string, in staff order
    midi_values: Tuple[int, ...]  # Base pitch per string, in staff order

    @property
    def is_custom(self) -> bool:
        return self.name == CUSTOM_TUNING

    @property
    def formatted(self) -> str:
        return format_tuning(self)


class TuningIdentifier:
    """Match string pitches against the table of known tunings."""

    def __init__(self, known_tunings: Optional[Dict[str, Sequence[int]]] = None):
        """
        Initialize TuningIdentifier.

        Args:
            known_tunings: Name to pitches mapping, thickest string first
                (default: KNOWN_TUNINGS)
        """
        if known_tunings is None:
            known_tunings = KNOWN_TUNINGS
        self.known_tunings = {name: tuple(p) for name, p in known_tunings.items()}

    def identify(self, tuning: Sequence[int]) -> str:
        """Name of the tuning, or "Custom" when no known tuning matches."""
        length = len(tuning)
        for name, values in self.known_tunings.items():
            if len(values) != length:
                continue
            if all(tuning[i] == values[length - 1 - i] for i in range(length)):
                return name
        return CUSTOM_TUNING

    def describe(self, tuning: Sequence[int]) -> TuningInfo:
        """Build a TuningInfo for string pitches in staff order."""
        midi_values = tuple(int(p) for p in tuning)
        return TuningInfo(
            name=self.identify(midi_values),
            notes=tuple(midi_to_note_name(p) for p in midi_values),
            midi_values=midi_values,
        )

    def from_score(self, score: Score) -> TuningInfo:
        """
        Tuning of the first staff of the first track.

        Falls back to standard tuning when the score carries none.

        Raises:
            ValueError: If score is None
        """
        if score is None:
            raise ValueError("score is required")
        return self.describe(read_score_tuning(score))


def read_score_tuning(score: Score) -> Tuple[int, ...]:
    """String pitches of the score's first staff, standard tuning if absent."""
    try:
        tuning = score.first_tuning()
    except (AttributeError, IndexError, TypeError) as e:
        warnings.warn(f"Could not read tuning from score, using standard: {e}")
        tuning = None

    if not tuning:
        logger.debug("No tuning in score, using standard")
        return STANDARD_TUNING
    return tuple(tuning)


def format_tuning(info: TuningInfo) -> str:
    """Display string, thinnest string last ("E - A - D - G - B - E")."""
    return " - ".join(reversed(info.notes))


_default_identifier = TuningIdentifier()


def get_tuning_info(score: Score) -> TuningInfo:
    """Identify the tuning of a score with the default identifier."""
    return _default_identifier.from_score(score)
