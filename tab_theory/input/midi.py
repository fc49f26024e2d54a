"""MIDI import via pretty_midi."""

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Union

import numpy as np
import pretty_midi

from ..core import Bar, Beat, Note, Score, Staff, Track, Voice


def load_midi(path: Union[str, Path]) -> Score:
    """
    Load a Score from a MIDI file.

    Every non-drum instrument becomes a track with a single staff. Notes
    sharing an onset form one beat; downbeats split the beats into bars.
    MIDI carries no string tuning, so staves have none.

    Args:
        path: Path to a .mid/.midi file

    Returns:
        Score
    """
    midi = pretty_midi.PrettyMIDI(str(path))
    return score_from_pretty_midi(midi)


def score_from_pretty_midi(midi: pretty_midi.PrettyMIDI) -> Score:
    """Convert a PrettyMIDI object to a Score."""
    downbeats = midi.get_downbeats()

    tracks = []
    for instrument in midi.instruments:
        if instrument.is_drum:
            continue

        name = instrument.name or pretty_midi.program_to_instrument_name(instrument.program)
        bars = _group_into_bars(instrument.notes, downbeats)
        tracks.append(Track(name=name, staves=[Staff(bars=bars)]))

    return Score(tracks=tracks)


def _group_into_bars(notes: List[pretty_midi.Note], downbeats: np.ndarray) -> List[Bar]:
    # bar index -> onset -> notes
    grouped: Dict[int, Dict[float, List[Note]]] = defaultdict(lambda: defaultdict(list))

    for midi_note in sorted(notes, key=lambda n: (n.start, n.pitch)):
        bar_idx = 0
        if len(downbeats):
            bar_idx = max(0, int(np.searchsorted(downbeats, midi_note.start, side="right")) - 1)
        grouped[bar_idx][midi_note.start].append(
            Note(pitch=midi_note.pitch, velocity=midi_note.velocity)
        )

    bars = []
    for bar_idx in sorted(grouped):
        beats = [Beat(notes=grouped[bar_idx][onset]) for onset in sorted(grouped[bar_idx])]
        bars.append(Bar(voices=[Voice(beats=beats)]))
    return bars
