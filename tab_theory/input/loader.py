"""Score loading - pick a reader by file suffix."""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from ..core import Bar, Beat, Note, Score, Staff, Track, Voice


class ScoreLoader:
    """Load symbolic scores from JSON, MIDI and MusicXML files."""

    JSON_FORMATS = {".json"}
    MIDI_FORMATS = {".mid", ".midi"}
    MUSICXML_FORMATS = {".musicxml", ".xml", ".mxl"}
    SUPPORTED_FORMATS = JSON_FORMATS | MIDI_FORMATS | MUSICXML_FORMATS

    def __init__(self, tuning: Optional[Sequence[int]] = None):
        """
        Initialize ScoreLoader.

        Args:
            tuning: String pitches (thinnest first) to set on staves that
                carry no tuning of their own
        """
        self.tuning = tuple(tuning) if tuning else None

    def load(self, path: Union[str, Path]) -> Score:
        """
        Load a score file.

        Args:
            path: Path to a .json, .mid/.midi or .musicxml/.xml/.mxl file

        Returns:
            Score

        Raises:
            ValueError: If file format not supported or the file is malformed
            FileNotFoundError: If file doesn't exist
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Score file not found: {path}")

        suffix = path.suffix.lower()
        if suffix not in self.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported format: {path.suffix}. "
                f"Supported: {sorted(self.SUPPORTED_FORMATS)}"
            )

        if suffix in self.JSON_FORMATS:
            score = load_json(path)
        elif suffix in self.MIDI_FORMATS:
            from .midi import load_midi
            score = load_midi(path)
        else:
            from .musicxml import load_musicxml
            score = load_musicxml(path)

        if not score.title:
            score.title = path.stem
        if self.tuning:
            self._apply_tuning(score)
        return score

    def _apply_tuning(self, score: Score) -> None:
        for track in score.tracks:
            for staff in track.staves:
                if not staff.tuning:
                    staff.tuning = self.tuning


def load_json(source: Union[str, Path, Dict[str, Any]]) -> Score:
    """Load a Score from a JSON file or an already parsed dict.

    The JSON mirrors the score tree::

        {"title": "...", "tracks": [{"name": "...", "staves": [
            {"tuning": [64, 59, 55, 50, 45, 40],
             "bars": [{"voices": [{"beats": [{"notes": [
                 {"pitch": 64, "string": 1, "fret": 0}]}]}]}]}]}]}

    A note may also be a bare MIDI pitch.
    """
    if isinstance(source, dict):
        data = source
    else:
        with open(source, encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid score JSON in {source}: {e}") from e

    try:
        return parse_score(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed score data: {e}") from e


def parse_score(data: Dict[str, Any]) -> Score:
    """Build a Score from the JSON tree layout."""
    tracks = []
    for track_data in data.get("tracks", []):
        staves = []
        for staff_data in track_data.get("staves", []):
            tuning = staff_data.get("tuning")
            staves.append(Staff(
                tuning=tuple(int(p) for p in tuning) if tuning else None,
                bars=[_parse_bar(b) for b in staff_data.get("bars", [])],
            ))
        tracks.append(Track(name=track_data.get("name", ""), staves=staves))
    return Score(tracks=tracks, title=data.get("title", ""))


def _parse_bar(bar_data: Dict[str, Any]) -> Bar:
    voices = []
    for voice_data in bar_data.get("voices", []):
        beats = [
            Beat(notes=[_parse_note(n) for n in beat_data.get("notes", [])])
            for beat_data in voice_data.get("beats", [])
        ]
        voices.append(Voice(beats=beats))
    return Bar(voices=voices)


def _parse_note(note_data: Union[int, Dict[str, Any]]) -> Note:
    if isinstance(note_data, int):
        return Note(pitch=note_data)
    return Note(
        pitch=int(note_data["pitch"]),
        string=note_data.get("string"),
        fret=note_data.get("fret"),
        velocity=note_data.get("velocity", 64),
    )
