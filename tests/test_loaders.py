"""Tests for score loading."""

import json

import pretty_midi
import pytest

from tab_theory.core import STANDARD_TUNING
from tab_theory.input import ScoreLoader, load_json, parse_score
from tab_theory.input.midi import score_from_pretty_midi
from tab_theory.inference import detect_key, get_tuning_info


def tree(tuning=None, notes=(64, 67, 71)):
    staff = {
        "bars": [{"voices": [{"beats": [{"notes": [n]} for n in notes]}]}],
    }
    if tuning is not None:
        staff["tuning"] = list(tuning)
    return {"title": "Riff", "tracks": [{"name": "Guitar", "staves": [staff]}]}


class TestJsonLoader:
    """Test the JSON score tree format."""

    def test_parse_bare_pitches(self):
        score = parse_score(tree())

        assert score.title == "Riff"
        assert score.tracks[0].name == "Guitar"
        assert [n.pitch for n in score.iter_notes()] == [64, 67, 71]

    def test_parse_note_objects(self):
        data = tree(notes=[{"pitch": 64, "string": 1, "fret": 0}, {"pitch": 52, "string": 4, "fret": 2}])
        notes = list(parse_score(data).iter_notes())

        assert notes[1].pitch == 52
        assert notes[1].string == 4
        assert notes[1].fret == 2

    def test_tuning(self):
        score = parse_score(tree(tuning=[64, 59, 55, 50, 45, 38]))
        assert get_tuning_info(score).name == "Drop D"

    def test_load_file(self, tmp_path):
        path = tmp_path / "riff.json"
        path.write_text(json.dumps(tree(tuning=STANDARD_TUNING)), encoding="utf-8")

        score = ScoreLoader().load(path)

        assert score.note_count == 3
        assert score.first_tuning() == STANDARD_TUNING

    def test_title_defaults_to_file_stem(self, tmp_path):
        data = tree()
        del data["title"]
        path = tmp_path / "solo.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        assert ScoreLoader().load(path).title == "solo"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError):
            load_json(path)

    def test_note_without_pitch(self):
        with pytest.raises(ValueError):
            load_json(tree(notes=[{"string": 1}]))

    def test_empty_document(self):
        score = load_json({})
        assert score.tracks == []
        assert detect_key(score).confidence == 0.0


class TestScoreLoader:
    """Test format dispatch and errors."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ScoreLoader().load(tmp_path / "nope.json")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "song.gp5"
        path.write_bytes(b"\x00")

        with pytest.raises(ValueError):
            ScoreLoader().load(path)

    def test_default_tuning_fills_empty_staves(self, tmp_path):
        path = tmp_path / "riff.json"
        path.write_text(json.dumps(tree()), encoding="utf-8")

        score = ScoreLoader(tuning=[64, 59, 55, 50, 45, 38]).load(path)

        assert get_tuning_info(score).name == "Drop D"

    def test_default_tuning_keeps_file_tuning(self, tmp_path):
        path = tmp_path / "riff.json"
        path.write_text(json.dumps(tree(tuning=STANDARD_TUNING)), encoding="utf-8")

        score = ScoreLoader(tuning=[64, 59, 55, 50, 45, 38]).load(path)

        assert get_tuning_info(score).name == "Standard (E)"


def make_midi(pitches, drum_pitches=()):
    midi = pretty_midi.PrettyMIDI(initial_tempo=120.0)
    guitar = pretty_midi.Instrument(program=25, name="Guitar")
    for i, pitch in enumerate(pitches):
        guitar.notes.append(pretty_midi.Note(velocity=90, pitch=pitch, start=0.05 + i * 0.5, end=0.45 + i * 0.5))
    # Two notes struck together
    guitar.notes.append(pretty_midi.Note(velocity=90, pitch=55, start=0.05, end=0.45))
    midi.instruments.append(guitar)

    if drum_pitches:
        drums = pretty_midi.Instrument(program=0, is_drum=True, name="Drums")
        for i, pitch in enumerate(drum_pitches):
            drums.notes.append(pretty_midi.Note(velocity=100, pitch=pitch, start=i * 0.5, end=i * 0.5 + 0.1))
        midi.instruments.append(drums)
    return midi


class TestMidiLoader:
    """Test MIDI import."""

    def test_instruments_become_tracks(self):
        score = score_from_pretty_midi(make_midi([60, 64, 67, 72], drum_pitches=[36, 38, 36, 38]))

        assert len(score.tracks) == 1
        assert score.tracks[0].name == "Guitar"
        assert score.tracks[0].staves[0].tuning is None
        assert sorted(n.pitch for n in score.iter_notes()) == [55, 60, 64, 67, 72]

    def test_simultaneous_notes_share_a_beat(self):
        score = score_from_pretty_midi(make_midi([60, 64]))
        first_beat = score.tracks[0].staves[0].bars[0].voices[0].beats[0]

        assert sorted(n.pitch for n in first_beat.notes) == [55, 60]

    def test_bars_follow_downbeats(self):
        """At 120 BPM in 4/4 a bar lasts two seconds, four notes each."""
        score = score_from_pretty_midi(make_midi([60, 62, 64, 65, 67, 69, 71, 72]))
        bars = score.tracks[0].staves[0].bars

        assert len(bars) == 2
        assert len(bars[1].voices[0].beats) == 4

    def test_load_file(self, tmp_path):
        path = tmp_path / "riff.mid"
        make_midi([60, 64, 67] * 4).write(str(path))

        score = ScoreLoader().load(path)
        key_info = detect_key(score)

        assert score.title == "riff"
        assert (key_info.root, key_info.mode) == ("C", "major")
        assert get_tuning_info(score).name == "Standard (E)"


class TestMusicXmlLoader:
    """Test MusicXML import through music21 streams."""

    def test_parts_measures_and_chords(self):
        from music21 import chord, note, stream
        from tab_theory.input.musicxml import score_from_music21

        part = stream.Part()
        part.partName = "Guitar"
        m1 = stream.Measure(number=1)
        m1.append(note.Note("E4", quarterLength=2))
        m1.append(note.Rest(quarterLength=2))
        m2 = stream.Measure(number=2)
        m2.append(chord.Chord(["C4", "E4", "G4"], quarterLength=4))
        part.append([m1, m2])
        parsed = stream.Score()
        parsed.insert(0, part)

        score = score_from_music21(parsed)

        assert len(score.tracks) == 1
        assert score.tracks[0].name == "Guitar"
        bars = score.tracks[0].staves[0].bars
        assert len(bars) == 2
        assert [n.pitch for n in bars[0].voices[0].beats[0].notes] == [64]
        assert sorted(n.pitch for n in bars[1].voices[0].beats[0].notes) == [60, 64, 67]
        assert score.note_count == 4

    def test_chord_symbols_are_not_notes(self):
        """A <harmony> chord name above the staff adds no pitches."""
        from music21 import harmony, note, stream
        from tab_theory.input.musicxml import score_from_music21

        part = stream.Part()
        measure = stream.Measure(number=1)
        measure.insert(0, harmony.ChordSymbol("F#"))
        measure.insert(0, note.Note("C4", quarterLength=4))
        part.append(measure)
        parsed = stream.Score()
        parsed.insert(0, part)

        score = score_from_music21(parsed)

        assert [n.pitch for n in score.iter_notes()] == [60]
