"""Analysis layer - Low-level statistics over score notes."""

from .pitch import PitchHistogram, build_pitch_histogram, build_histogram_from_notes

__all__ = [
    "PitchHistogram",
    "build_pitch_histogram",
    "build_histogram_from_notes",
]
