"""Score tree - tracks, staves, bars, voices and beats around Notes.

The analysis layers only read two things from a score: every note in it
and the tuning of the first staff of the first track. Everything else is
kept so loaders can preserve the structure of the source file.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from .note import Note


@dataclass
class Beat:
    """Notes struck together."""

    notes: List[Note] = field(default_factory=list)


@dataclass
class Voice:
    """A single melodic line inside a bar."""

    beats: List[Beat] = field(default_factory=list)


@dataclass
class Bar:
    """A measure."""

    voices: List[Voice] = field(default_factory=list)


@dataclass
class Staff:
    """A staff, optionally with a string tuning.

    Attributes:
        tuning: Base pitch of each string, thinnest string first
        bars: Bars of the staff
    """

    tuning: Optional[Tuple[int, ...]] = None
    bars: List[Bar] = field(default_factory=list)

    def iter_notes(self) -> Iterator[Note]:
        for bar in self.bars:
            for voice in bar.voices:
                for beat in voice.beats:
                    yield from beat.notes


@dataclass
class Track:
    """An instrument track."""

    name: str = ""
    staves: List[Staff] = field(default_factory=list)


@dataclass
class Score:
    """A symbolic score.

    Analysis never mutates a score; results are derived fresh per call.
    """

    tracks: List[Track] = field(default_factory=list)
    title: str = ""

    def iter_notes(self) -> Iterator[Note]:
        """Yield every note of every track, staff, bar, voice and beat."""
        for track in self.tracks:
            for staff in track.staves:
                yield from staff.iter_notes()

    def first_tuning(self) -> Optional[Tuple[int, ...]]:
        """Tuning of the first staff of the first track, or None."""
        if not self.tracks or not self.tracks[0].staves:
            return None
        tuning = self.tracks[0].staves[0].tuning
        if not tuning:
            return None
        return tuple(tuning)

    @property
    def note_count(self) -> int:
        return sum(1 for _ in self.iter_notes())

    @classmethod
    def from_pitches(
        cls,
        pitches: Iterable[int],
        tuning: Optional[Iterable[int]] = None,
        title: str = "",
    ) -> "Score":
        """Build a one-track score with one note per beat."""
        beats = [Beat(notes=[Note(pitch=int(p))]) for p in pitches]
        staff = Staff(
            tuning=tuple(tuning) if tuning is not None else None,
            bars=[Bar(voices=[Voice(beats=beats)])],
        )
        return cls(tracks=[Track(staves=[staff])], title=title)
