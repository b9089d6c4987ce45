"""
MIDI number reference data.

Maps MIDI note numbers to pitch names, octaves and natural/accidental
flags. Everything here is a pure function of the MIDI number; 60 is middle C
(C4).
"""

import re
from dataclasses import dataclass

from .errors import InvalidNoteName

MIN_MIDI_NUMBER = 0
MAX_MIDI_NUMBER = 127
MIDDLE_C = 60

# Flat spelling is canonical; sharps are accepted by from_note
PITCH_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")
ACCIDENTAL_PITCH_NAMES = frozenset({"Db", "Eb", "Gb", "Ab", "Bb"})

PITCH_INDEXES: dict[str, int] = {
    "C": 0, "C#": 1, "Db": 1,
    "D": 2, "D#": 3, "Eb": 3,
    "E": 4,
    "F": 5, "F#": 6, "Gb": 6,
    "G": 7, "G#": 8, "Ab": 8,
    "A": 9, "A#": 10, "Bb": 10,
    "B": 11,
}

_NOTE_REGEX = re.compile(r"^([a-g])([#b]?)(-?\d+)$")


@dataclass(frozen=True)
class NoteAttributes:
    """
    Attributes derived from a MIDI number.

    Attributes:
        midi_number: The MIDI number these attributes describe.
        pitch_name: One of PITCH_NAMES.
        octave: Octave number, with MIDI 60 in octave 4.
        is_accidental: True for the five sharp/flat pitch classes.
    """

    midi_number: int
    pitch_name: str
    octave: int
    is_accidental: bool

    @property
    def note(self) -> str:
        """Lowercase scientific name, e.g. 'c4' or 'db4'."""
        return f"{self.pitch_name.lower()}{self.octave}"


def get_attributes(midi_number: int) -> NoteAttributes:
    pitch_name = PITCH_NAMES[midi_number % 12]
    octave = midi_number // 12 - 1
    return NoteAttributes(
        midi_number=midi_number,
        pitch_name=pitch_name,
        octave=octave,
        is_accidental=pitch_name in ACCIDENTAL_PITCH_NAMES,
    )


def from_note(name: str) -> int:
    """
    Convert a note name to a MIDI number.

    Args:
        name: Note name with octave, e.g. 'c4', 'C#4', 'Db4', 'a-1'.

    Returns:
        MIDI note number.

    Raises:
        InvalidNoteName: If the name cannot be parsed.
    """
    if not isinstance(name, str):
        raise InvalidNoteName(name)
    match = _NOTE_REGEX.match(name.strip().lower())
    if match is None:
        raise InvalidNoteName(name)
    letter, accidental, octave = match.groups()
    pitch = letter.upper() + accidental
    if pitch not in PITCH_INDEXES:
        raise InvalidNoteName(name)
    return (int(octave) + 1) * 12 + PITCH_INDEXES[pitch]


NATURAL_MIDI_NUMBERS: tuple[int, ...] = tuple(
    n for n in range(MIN_MIDI_NUMBER, MAX_MIDI_NUMBER + 1)
    if not get_attributes(n).is_accidental
)


def is_natural(value) -> bool:
    """True for an int (not a bool) that is a natural MIDI number in 0..127."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in NATURAL_MIDI_NUMBERS
