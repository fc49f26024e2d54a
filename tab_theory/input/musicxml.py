"""MusicXML import via music21."""

from pathlib import Path
from typing import List, Union

from ..core import Bar, Beat, Note, Score, Staff, Track, Voice


def load_musicxml(path: Union[str, Path]) -> Score:
    """
    Load a Score from a MusicXML file.

    Parts become tracks with one staff, measures become bars and every
    note or chord becomes a beat. Rests and chord symbols are skipped.
    Staff tuning is not read; staves are left without one.

    Args:
        path: Path to a .musicxml, .xml or .mxl file
    """
    try:
        from music21 import converter
    except ImportError:
        raise ImportError("music21 is required for MusicXML import")

    parsed = converter.parse(str(path))
    return score_from_music21(parsed)


def score_from_music21(parsed) -> Score:
    """Convert a parsed music21 stream to a Score."""
    from music21 import stream

    parts = list(parsed.parts) if hasattr(parsed, "parts") else []
    if not parts:
        parts = [parsed]

    tracks = []
    for part in parts:
        measures = list(part.getElementsByClass(stream.Measure))
        if measures:
            bars = [_measure_to_bar(m) for m in measures]
        else:
            bars = [Bar(voices=[Voice(beats=_beats(part.recurse()))])]
        tracks.append(Track(name=part.partName or "", staves=[Staff(bars=bars)]))

    title = ""
    if parsed.metadata is not None and parsed.metadata.title:
        title = parsed.metadata.title
    return Score(tracks=tracks, title=title)


def _measure_to_bar(measure) -> Bar:
    voices = list(measure.voices)
    if not voices:
        return Bar(voices=[Voice(beats=_beats(measure))])
    return Bar(voices=[Voice(beats=_beats(v)) for v in voices])


def _beats(container) -> List[Beat]:
    from music21 import chord, harmony

    beats = []
    for element in container.notes:
        # <harmony> symbols name a chord, they are not played notes
        if isinstance(element, harmony.ChordSymbol):
            continue
        if isinstance(element, chord.Chord):
            pitches = [p.midi for p in element.pitches]
        else:
            pitches = [element.pitch.midi]
        beats.append(Beat(notes=[Note(pitch=int(p)) for p in pitches]))
    return beats
