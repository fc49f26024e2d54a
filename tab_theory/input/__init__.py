"""Input layer - Score file loading."""

from .loader import ScoreLoader, load_json, parse_score

__all__ = [
    "ScoreLoader",
    "load_json",
    "parse_score",
]
