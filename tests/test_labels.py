"""Tests for note labels, the key cache and settings."""

import pytest

from tab_theory.config import (
    AppSettings,
    DEFAULT_SETTINGS,
    DisplaySettings,
    NotationSettings,
)
from tab_theory.core import Score
from tab_theory.inference import KeyDetector
from tab_theory.output import KeyCache, NoteLabeler


class CountingDetector(KeyDetector):
    """KeyDetector that counts full detections."""

    def __init__(self):
        self.calls = 0

    def detect(self, score):
        self.calls += 1
        return super().detect(score)


def c_major_score() -> Score:
    return Score.from_pitches([60, 64, 67] * 10 + [65, 62, 71])


def labeler_for(target: str, fmt: str = "english", cache=None) -> NoteLabeler:
    settings = AppSettings(
        display=DisplaySettings(note_names_target=target),
        notation=NotationSettings(note_name_format=fmt),
    )
    return NoteLabeler(settings=settings, cache=cache)


class TestKeyCache:
    """Test the single-entry key cache."""

    def test_same_score_detected_once(self):
        detector = CountingDetector()
        cache = KeyCache(detector)
        score = c_major_score()

        first = cache.get(score)
        second = cache.get(score)

        assert first is second
        assert detector.calls == 1
        assert score in cache

    def test_new_score_replaces_entry(self):
        detector = CountingDetector()
        cache = KeyCache(detector)
        score_a = c_major_score()
        score_b = Score.from_pitches([57, 60, 64] * 10 + [56])

        cache.get(score_a)
        cache.get(score_b)

        assert detector.calls == 2
        assert score_b in cache
        assert score_a not in cache

    def test_equal_but_distinct_score_is_a_miss(self):
        """Entries are keyed by identity, not by content."""
        detector = CountingDetector()
        cache = KeyCache(detector)

        cache.get(c_major_score())
        cache.get(c_major_score())

        assert detector.calls == 2

    def test_invalidate(self):
        detector = CountingDetector()
        cache = KeyCache(detector)
        score = c_major_score()

        cache.get(score)
        cache.invalidate()
        cache.get(score)

        assert detector.calls == 2


class TestNoteLabeler:
    """Test label text per display target."""

    def test_tab_numbers(self):
        assert labeler_for("tab-numbers").label(61, c_major_score()) == "C#"

    def test_tab_numbers_octave(self):
        assert labeler_for("tab-numbers-octave").label(61, c_major_score()) == "C#4"

    def test_tab_numbers_german(self):
        assert labeler_for("tab-numbers-octave", fmt="german").label(59, c_major_score()) == "H3"

    def test_scale_degrees(self):
        labeler = labeler_for("scale-degrees")
        score = c_major_score()

        assert labeler.label(67, score) == "D4"
        assert labeler.label(60, score) == "T4"
        assert labeler.label(52, score) == "M3"

    def test_scale_degrees_roman(self):
        labeler = labeler_for("scale-degrees-roman")
        score = c_major_score()

        assert labeler.label(67, score) == "V4"
        assert labeler.label(71, score) == "VII4"

    def test_none(self):
        assert labeler_for("none").label(60, c_major_score()) == ""

    def test_note_names_do_not_detect_key(self):
        detector = CountingDetector()
        labeler = labeler_for("tab-numbers", cache=KeyCache(detector))
        labeler.label_score(c_major_score())

        assert detector.calls == 0

    def test_label_score_detects_key_once(self):
        detector = CountingDetector()
        labeler = labeler_for("scale-degrees", cache=KeyCache(detector))
        score = c_major_score()

        labels = labeler.label_score(score)

        assert len(labels) == score.note_count
        assert labels[0][1] == "T4"
        assert detector.calls == 1

    def test_reset_forces_detection(self):
        detector = CountingDetector()
        labeler = labeler_for("scale-degrees", cache=KeyCache(detector))
        score = c_major_score()

        labeler.label(60, score)
        labeler.reset()
        labeler.label(60, score)

        assert detector.calls == 2

    def test_default_settings(self):
        labeler = NoteLabeler()
        assert labeler.target == "tab-numbers"
        assert labeler.label(64, c_major_score()) == "E"


class TestSettings:
    """Test settings dataclasses."""

    def test_defaults(self):
        assert DEFAULT_SETTINGS.display.note_names_target == "tab-numbers"
        assert DEFAULT_SETTINGS.display.note_display_mechanism == "replace"
        assert DEFAULT_SETTINGS.notation.note_name_format == "english"

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            DisplaySettings(note_names_target="everything")
        with pytest.raises(ValueError):
            DisplaySettings(note_display_mechanism="popup")
        with pytest.raises(ValueError):
            NotationSettings(note_name_format="klingon")

    def test_from_dict_merges_over_defaults(self):
        settings = AppSettings.from_dict({
            "display": {"note_names_target": "scale-degrees", "theme": "dark"},
            "playback": {"speed": 100},
        })

        assert settings.display.note_names_target == "scale-degrees"
        assert settings.display.note_display_mechanism == "replace"
        assert settings.notation.note_name_format == "english"
        assert settings.display.shows_scale_degrees

    def test_from_dict_validates(self):
        with pytest.raises(ValueError):
            AppSettings.from_dict({"notation": {"note_name_format": "morse"}})

    def test_round_trip(self):
        settings = AppSettings.from_dict({"notation": {"note_name_format": "solfege_flat"}})
        assert AppSettings.from_dict(settings.to_dict()) == settings
