"""Notation and display settings."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Mapping, Optional

from .core import NOTE_NAME_TABLES

NOTE_NAMES_TARGETS = (
    "none",
    "tab-numbers",
    "tab-numbers-octave",
    "scale-degrees",
    "scale-degrees-roman",
)
NOTE_DISPLAY_MECHANISMS = ("overlay", "replace")


def _check_choice(name: str, value: str, choices) -> None:
    if value not in choices:
        raise ValueError(f"Invalid {name}: {value!r}. Supported: {tuple(choices)}")


@dataclass
class NotationSettings:
    """Notation settings.

    Attributes:
        note_name_format: Naming system for note labels (default: "english")
    """

    note_name_format: str = "english"

    def __post_init__(self):
        _check_choice("note_name_format", self.note_name_format, NOTE_NAME_TABLES)


@dataclass
class DisplaySettings:
    """Display settings.

    Attributes:
        note_names_target: What note labels show (default: "tab-numbers")
        note_display_mechanism: Draw labels over or instead of tab numbers
            (default: "replace")
    """

    note_names_target: str = "tab-numbers"
    note_display_mechanism: str = "replace"

    def __post_init__(self):
        _check_choice("note_names_target", self.note_names_target, NOTE_NAMES_TARGETS)
        _check_choice(
            "note_display_mechanism", self.note_display_mechanism, NOTE_DISPLAY_MECHANISMS
        )

    @property
    def shows_scale_degrees(self) -> bool:
        return self.note_names_target in ("scale-degrees", "scale-degrees-roman")


@dataclass
class AppSettings:
    """All settings."""

    display: DisplaySettings = field(default_factory=DisplaySettings)
    notation: NotationSettings = field(default_factory=NotationSettings)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> "AppSettings":
        """Merge a partial settings mapping over the defaults.

        Unknown sections and keys are ignored.
        """
        data = data or {}
        defaults = cls().to_dict()

        display = {**defaults["display"], **_known(data.get("display"), defaults["display"])}
        notation = {**defaults["notation"], **_known(data.get("notation"), defaults["notation"])}

        return cls(display=DisplaySettings(**display), notation=NotationSettings(**notation))

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return asdict(self)


def _known(section: Optional[Mapping[str, Any]], reference: Mapping[str, Any]) -> Dict[str, Any]:
    if not section:
        return {}
    return {k: v for k, v in section.items() if k in reference}


DEFAULT_SETTINGS = AppSettings()
