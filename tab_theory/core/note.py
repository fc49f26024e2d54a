"""Note data class - the fundamental unit of a symbolic score."""

from dataclasses import dataclass
from typing import Optional

from .constants import PITCH_NAMES


@dataclass(frozen=True)
class Note:
    """Represents a musical note."""

    pitch: int  # MIDI pitch (0-127)
    string: Optional[int] = None  # 1-based string number, thinnest string is 1
    fret: Optional[int] = None
    velocity: int = 64  # MIDI velocity (0-127)

    @property
    def pitch_name(self) -> str:
        """Get note name (e.g., 'C4', 'A#3')."""
        octave = (self.pitch // 12) - 1
        name = PITCH_NAMES[self.pitch % 12]
        return f"{name}{octave}"

    @property
    def pitch_class(self) -> int:
        """Get pitch class (0-11, where 0=C)."""
        return self.pitch % 12

    @property
    def octave(self) -> int:
        """Octave number, middle C (60) is in octave 4."""
        return (self.pitch // 12) - 1
