"""Key detection - Identify the tonal center of a score.

Implements Krumhansl-Schmuckler key finding:
- Pitch class histogram of every note in the score
- Pearson correlation against major/minor profiles rotated to all 12 tonics
- Deterministic tie-break (first candidate in scan order wins)
- Confidence mapped from correlation into [0, 1]
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Optional, Sequence, Union

import numpy as np

from ..core import Score, PITCH_NAMES, note_name_to_pitch_class
from ..analysis import PitchHistogram, build_pitch_histogram

logger = logging.getLogger(__name__)


def _frozen(values: Sequence[float]) -> np.ndarray:
    array = np.array(values, dtype=float)
    array.setflags(write=False)
    return array


# Krumhansl-Schmuckler key profiles, tonic at index 0
MAJOR_PROFILE = _frozen(
    [6.35, 2.23, 3.48, 2.33, 4.38, 4.09, 2.52, 5.19, 2.39, 3.66, 2.29, 2.88]
)
MINOR_PROFILE = _frozen(
    [6.33, 2.68, 3.52, 5.38, 2.60, 3.53, 2.54, 4.75, 3.98, 2.69, 3.34, 3.17]
)

KEY_NAMES_RU = MappingProxyType({
    "C major": "До мажор",
    "C# major": "До-диез мажор",
    "D major": "Ре мажор",
    "D# major": "Ре-диез мажор",
    "E major": "Ми мажор",
    "F major": "Фа мажор",
    "F# major": "Фа-диез мажор",
    "G major": "Соль мажор",
    "G# major": "Соль-диез мажор",
    "A major": "Ля мажор",
    "A# major": "Ля-диез мажор",
    "B major": "Си мажор",
    "C minor": "До минор",
    "C# minor": "До-диез минор",
    "D minor": "Ре минор",
    "D# minor": "Ре-диез минор",
    "E minor": "Ми минор",
    "F minor": "Фа минор",
    "F# minor": "Фа-диез минор",
    "G minor": "Соль минор",
    "G# minor": "Соль-диез минор",
    "A minor": "Ля минор",
    "A# minor": "Ля-диез минор",
    "B minor": "Си минор",
    "Db major": "Ре-бемоль мажор",
    "Eb major": "Ми-бемоль мажор",
    "Gb major": "Соль-бемоль мажор",
    "Ab major": "Ля-бемоль мажор",
    "Bb major": "Си-бемоль мажор",
    "Db minor": "Ре-бемоль минор",
    "Eb minor": "Ми-бемоль минор",
    "Gb minor": "Соль-бемоль минор",
    "Ab minor": "Ля-бемоль минор",
    "Bb minor": "Си-бемоль минор",
})

# Sums of squares below this are treated as zero variance
_ZERO_VARIANCE = 1e-24


@dataclass(frozen=True)
class KeyCandidate:
    """A candidate key with its score."""
    root: str
    mode: str
    correlation: float

    @property
    def name(self) -> str:
        return f"{self.root} {self.mode}"


@dataclass(frozen=True)
class KeyInfo:
    """Container for key detection results."""

    root: str  # Tonic name (e.g., "C", "F#")
    mode: str  # "major" or "minor"
    confidence: float  # 0.0 - 1.0, 0.0 means no notes were seen
    correlation: float = 0.0  # Best Pearson correlation, -1.0 - 1.0
    pitch_class_distribution: np.ndarray = field(
        default_factory=lambda: _frozen(np.zeros(12)), compare=False, repr=False
    )
    note_count: int = 0

    @property
    def name(self) -> str:
        return f"{self.root} {self.mode}"

    @property
    def name_ru(self) -> str:
        return KEY_NAMES_RU.get(self.name, self.name)

    @property
    def relative_key(self) -> Optional[str]:
        """
        Get the relative major/minor key.

        Relative minor is 3 semitones down from major.
        Relative major is 3 semitones up from minor.
        """
        root_idx = note_name_to_pitch_class(self.root)
        if self.mode == "major":
            return f"{PITCH_NAMES[(root_idx - 3) % 12]} minor"
        elif self.mode == "minor":
            return f"{PITCH_NAMES[(root_idx + 3) % 12]} major"
        return None

    @property
    def parallel_key(self) -> Optional[str]:
        """Get the parallel major/minor key (same root, other mode)."""
        if self.mode == "major":
            return f"{self.root} minor"
        elif self.mode == "minor":
            return f"{self.root} major"
        return None


HistogramLike = Union[PitchHistogram, np.ndarray, Sequence[float]]


class KeyDetector:
    """Detect the musical key of a score.

    Every input produces a KeyInfo; an empty score yields C major with
    confidence 0.
    """

    MAJOR_PROFILE = MAJOR_PROFILE
    MINOR_PROFILE = MINOR_PROFILE

    def detect(self, score: Score) -> KeyInfo:
        """
        Detect the key of a score.

        Raises:
            ValueError: If score is None
        """
        return self.detect_from_histogram(build_pitch_histogram(score))

    def detect_from_histogram(self, histogram: HistogramLike) -> KeyInfo:
        """
        Detect the key from a pitch class histogram.

        Args:
            histogram: PitchHistogram or 12 pitch class weights

        Returns:
            KeyInfo for the best (tonic, mode) pair
        """
        distribution, note_count = self._unpack(histogram)

        if not distribution.any():
            return KeyInfo(root="C", mode="major", confidence=0.0)

        best = None
        for candidate in self._iter_candidates(distribution):
            # Strict comparison keeps the first maximum in scan order
            if best is None or candidate.correlation > best.correlation:
                best = candidate

        # Correlation ranges -1 to 1, map to 0-1
        confidence = max(0.0, min(1.0, (best.correlation + 1) / 2))

        logger.debug("Detected key: %s confidence: %.2f", best.name, confidence)

        return KeyInfo(
            root=best.root,
            mode=best.mode,
            confidence=confidence,
            correlation=best.correlation,
            pitch_class_distribution=_frozen(distribution),
            note_count=note_count,
        )

    def candidates(self, histogram: HistogramLike) -> List[KeyCandidate]:
        """All 24 key candidates in scan order (tonic 0-11, major before minor)."""
        distribution, _ = self._unpack(histogram)
        return list(self._iter_candidates(distribution))

    def _iter_candidates(self, distribution: np.ndarray):
        for tonic in range(12):
            root = PITCH_NAMES[tonic]
            yield KeyCandidate(
                root, "major", self._correlate(distribution, self.rotate(self.MAJOR_PROFILE, tonic))
            )
            yield KeyCandidate(
                root, "minor", self._correlate(distribution, self.rotate(self.MINOR_PROFILE, tonic))
            )

    @staticmethod
    def rotate(profile: np.ndarray, tonic: int) -> np.ndarray:
        """Transpose a profile so index i holds profile[(i - tonic) % 12]."""
        return np.roll(profile, tonic % 12)

    @staticmethod
    def _correlate(distribution: np.ndarray, profile: np.ndarray) -> float:
        """Pearson correlation, 0.0 when either side has no variance."""
        dist_dev = distribution - distribution.mean()
        prof_dev = profile - profile.mean()

        denom_dist = float(np.dot(dist_dev, dist_dev))
        denom_prof = float(np.dot(prof_dev, prof_dev))
        if denom_dist < _ZERO_VARIANCE or denom_prof < _ZERO_VARIANCE:
            return 0.0

        return float(np.dot(dist_dev, prof_dev) / np.sqrt(denom_dist * denom_prof))

    @staticmethod
    def _unpack(histogram: HistogramLike):
        if isinstance(histogram, PitchHistogram):
            return np.asarray(histogram.distribution, dtype=float), histogram.note_count

        distribution = np.asarray(histogram, dtype=float)
        if distribution.shape != (12,):
            raise ValueError(
                f"Pitch class histogram must have 12 bins, got shape {distribution.shape}"
            )
        if not np.isfinite(distribution).all():
            raise ValueError("Pitch class histogram contains NaN or infinite weights")
        # Raw weights carry no note count
        return distribution, 0


_default_detector = KeyDetector()


def detect_key(score: Score) -> KeyInfo:
    """Detect the key of a score with the default detector."""
    return _default_detector.detect(score)
