"""Inference layer - Musical understanding of a score.

This layer builds key and instrument context from score notes:
- Key detection (tonic, mode, confidence)
- Tuning identification (named string tunings)
- Scale degree mapping (degree codes and roman numerals per note)

Pipeline: Score -> PitchHistogram -> KeyInfo -> per-note scale degrees
"""

from .key import (
    KeyDetector,
    KeyInfo,
    KeyCandidate,
    MAJOR_PROFILE,
    MINOR_PROFILE,
    detect_key,
)
from .tuning import (
    TuningIdentifier,
    TuningInfo,
    KNOWN_TUNINGS,
    CUSTOM_TUNING,
    get_tuning_info,
    format_tuning,
    read_score_tuning,
)
from .degrees import (
    ScaleDegree,
    SCALE_DEGREES,
    ROMAN_NUMERALS,
    UNKNOWN_DEGREE,
    get_scale_degrees,
    get_scale_notes,
    get_scale_degree_for_note,
    convert_to_roman_numeral,
    scale_offsets,
)

__all__ = [
    # Key detection
    "KeyDetector",
    "KeyInfo",
    "KeyCandidate",
    "MAJOR_PROFILE",
    "MINOR_PROFILE",
    "detect_key",
    # Tuning
    "TuningIdentifier",
    "TuningInfo",
    "KNOWN_TUNINGS",
    "CUSTOM_TUNING",
    "get_tuning_info",
    "format_tuning",
    "read_score_tuning",
    # Scale degrees
    "ScaleDegree",
    "SCALE_DEGREES",
    "ROMAN_NUMERALS",
    "UNKNOWN_DEGREE",
    "get_scale_degrees",
    "get_scale_notes",
    "get_scale_degree_for_note",
    "convert_to_roman_numeral",
    "scale_offsets",
]
