"""Pitch class histogram of a score."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from ..core import Note, Score, PITCH_NAMES

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PitchHistogram:
    """Normalized 12-bin pitch class distribution.

    Attributes:
        distribution: 12 weights summing to 1 (all zero for an empty score)
        counts: Raw note count per pitch class
        note_count: Total notes seen
    """

    distribution: np.ndarray = field(default_factory=lambda: np.zeros(12))
    counts: np.ndarray = field(default_factory=lambda: np.zeros(12, dtype=int))
    note_count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.note_count == 0

    def as_dict(self) -> dict:
        """Distribution keyed by pitch name."""
        return {name: float(w) for name, w in zip(PITCH_NAMES, self.distribution)}


def build_histogram_from_notes(notes: Iterable[Note]) -> PitchHistogram:
    """Count pitch classes of notes and normalize the counts."""
    counts = np.zeros(12, dtype=int)
    for note in notes:
        counts[note.pitch % 12] += 1

    total = int(counts.sum())
    if total == 0:
        return PitchHistogram()

    distribution = counts / total
    return PitchHistogram(distribution=distribution, counts=counts, note_count=total)


def build_pitch_histogram(score: Score) -> PitchHistogram:
    """
    Build the pitch class histogram of every note in a score.

    Args:
        score: Score to analyze

    Returns:
        PitchHistogram (all zero when the score has no notes)

    Raises:
        ValueError: If score is None
    """
    if score is None:
        raise ValueError("score is required")

    histogram = build_histogram_from_notes(score.iter_notes())
    logger.debug("Total notes analyzed: %d", histogram.note_count)
    logger.debug("Note distribution: %s", histogram.counts.tolist())
    return histogram
