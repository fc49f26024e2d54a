"""Note labels - Display text for each note of a score.

Labels depend on the display target:
- tab-numbers:          note name ("C#")
- tab-numbers-octave:   note name with octave ("C#4")
- scale-degrees:        degree code with octave ("D4")
- scale-degrees-roman:  roman numeral with octave ("V4")
- none:                 no label

Scale degree labels need the score's key. Detection walks every note, so
the key of the last labelled score is kept in a one-entry cache.
"""

import logging
from typing import List, Optional, Tuple

from ..config import AppSettings
from ..core import Note, Score, midi_to_note_name_with_octave, midi_to_octave
from ..inference import (
    KeyDetector,
    KeyInfo,
    convert_to_roman_numeral,
    get_scale_degree_for_note,
)

logger = logging.getLogger(__name__)


class KeyCache:
    """Remember the key of one score, keyed by score identity."""

    def __init__(self, detector: Optional[KeyDetector] = None):
        self.detector = detector or KeyDetector()
        self._score: Optional[Score] = None
        self._key_info: Optional[KeyInfo] = None

    def get(self, score: Score) -> KeyInfo:
        """Key of the score, detected only when the score object changes."""
        if self._score is not score or self._key_info is None:
            logger.debug("Key cache miss, detecting key")
            self._key_info = self.detector.detect(score)
            self._score = score
        return self._key_info

    def invalidate(self) -> None:
        """Forget the cached key, e.g. when a new score is loaded."""
        self._score = None
        self._key_info = None

    def __contains__(self, score: Score) -> bool:
        return self._key_info is not None and self._score is score


class NoteLabeler:
    """Build display labels for notes according to the display settings."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        cache: Optional[KeyCache] = None,
    ):
        """
        Initialize NoteLabeler.

        Args:
            settings: Display and notation settings (default: AppSettings())
            cache: Key cache shared with other consumers
        """
        self.settings = settings or AppSettings()
        self.cache = cache or KeyCache()

    @property
    def target(self) -> str:
        return self.settings.display.note_names_target

    def label(self, pitch: int, score: Score) -> str:
        """
        Label for one MIDI pitch of a score.

        Args:
            pitch: MIDI pitch of the note
            score: Score the note belongs to (used for the key)

        Returns:
            Display text, empty when labels are off
        """
        target = self.target
        if target == "none":
            return ""

        if self.settings.display.shows_scale_degrees:
            key_info = self.cache.get(score)
            degree = get_scale_degree_for_note(pitch, key_info)
            if target == "scale-degrees-roman":
                degree = convert_to_roman_numeral(degree)
            return f"{degree}{midi_to_octave(pitch)}"

        return midi_to_note_name_with_octave(
            pitch,
            include_octave=target == "tab-numbers-octave",
            fmt=self.settings.notation.note_name_format,
        )

    def label_score(self, score: Score) -> List[Tuple[Note, str]]:
        """Label every note of a score, in score order."""
        return [(note, self.label(note.pitch, score)) for note in score.iter_notes()]

    def reset(self) -> None:
        """Drop cached state when a new score is loaded."""
        self.cache.invalidate()
