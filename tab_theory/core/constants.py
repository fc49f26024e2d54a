"""Global constants for Tab Theory."""

from types import MappingProxyType

# Pitch names
PITCH_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
PITCH_NAMES_FLAT = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Note names in the supported naming systems
NOTE_NAME_TABLES = MappingProxyType({
    "english": PITCH_NAMES,
    "german": ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "B", "H"),
    "solfege": ("Do", "Do#", "Re", "Re#", "Mi", "Fa", "Fa#", "Sol", "Sol#", "La", "La#", "Si"),
    # Enharmonic flat spellings
    "english_flat": PITCH_NAMES_FLAT,
    "german_flat": ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "B", "H"),
    "solfege_flat": ("Do", "Reb", "Re", "Mib", "Mi", "Fa", "Solb", "Sol", "Lab", "La", "Sib", "Si"),
})

# Tonics whose scales are spelled with flats
FLAT_KEYS = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb"})

# Guitar tunings, thinnest string first (E4 B3 G3 D3 A2 E2)
STANDARD_TUNING = (64, 59, 55, 50, 45, 40)
DROP_D_TUNING = (64, 59, 55, 50, 45, 38)
HALF_STEP_DOWN_TUNING = (63, 58, 54, 49, 44, 39)
WHOLE_STEP_DOWN_TUNING = (62, 57, 53, 48, 43, 38)

# Scale intervals from the tonic
MAJOR_SCALE = (0, 2, 4, 5, 7, 9, 11)
MINOR_SCALE = (0, 2, 3, 5, 7, 8, 10)  # Natural minor
