"""Tab Theory - Key, tuning and scale degree analysis for symbolic scores.

Architecture Layers:
    1. core/      - Note and score tree types, constants, note naming
    2. input/     - Score loading (JSON, MIDI, MusicXML)
    3. analysis/  - Pitch class histogram
    4. inference/ - Musical understanding (key, tuning, scale degrees)
    5. output/    - Note labels for display
"""

__version__ = "0.1.0"

# Core types
from .core import (
    Note,
    Score,
    Track,
    Staff,
    Bar,
    Voice,
    Beat,
    midi_to_note_name,
    midi_to_note_name_with_octave,
)

# Input layer
from .input import ScoreLoader

# Analysis layer
from .analysis import PitchHistogram, build_pitch_histogram

# Inference layer
from .inference import (
    KeyDetector,
    KeyInfo,
    TuningIdentifier,
    TuningInfo,
    ScaleDegree,
    detect_key,
    get_tuning_info,
    format_tuning,
    get_scale_degrees,
    get_scale_notes,
    get_scale_degree_for_note,
    convert_to_roman_numeral,
)

# Output layer
from .output import KeyCache, NoteLabeler

# Settings
from .config import AppSettings, DisplaySettings, NotationSettings

__all__ = [
    # Core
    "Note",
    "Score",
    "Track",
    "Staff",
    "Bar",
    "Voice",
    "Beat",
    "midi_to_note_name",
    "midi_to_note_name_with_octave",
    # Input
    "ScoreLoader",
    # Analysis
    "PitchHistogram",
    "build_pitch_histogram",
    # Inference
    "KeyDetector",
    "KeyInfo",
    "TuningIdentifier",
    "TuningInfo",
    "ScaleDegree",
    "detect_key",
    "get_tuning_info",
    "format_tuning",
    "get_scale_degrees",
    "get_scale_notes",
    "get_scale_degree_for_note",
    "convert_to_roman_numeral",
    # Output
    "KeyCache",
    "NoteLabeler",
    # Settings
    "AppSettings",
    "DisplaySettings",
    "NotationSettings",
]
