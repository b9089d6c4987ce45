"""
Piano Layout Module

Positions piano keys horizontally. Every position is measured in natural
(white) key widths from the left edge of the configured range, then scaled
so the whole range fills a width of exactly 1.
"""

from dataclasses import dataclass
from typing import Mapping

from .midi_numbers import get_attributes

# Number of natural keys in one octave
OCTAVE_WIDTH = 7

DEFAULT_ACCIDENTAL_WIDTH_RATIO = 0.65

# Left edge of each pitch class within an octave, in natural key widths.
# Accidentals sit 0.672 to the right of the natural below them.
DEFAULT_PITCH_POSITIONS: dict[str, float] = {
    "C": 0,
    "Db": 0.672,
    "D": 1,
    "Eb": 1.672,
    "E": 2,
    "F": 3,
    "Gb": 3.672,
    "G": 4,
    "Ab": 4.672,
    "A": 5,
    "Bb": 5.672,
    "B": 6,
}


@dataclass(frozen=True)
class KeyGeometry:
    """Horizontal placement of one key as fractions of the keyboard width."""

    left: float
    width: float

    @property
    def right(self) -> float:
        return self.left + self.width


def absolute_key_position(midi_number: int, pitch_positions: Mapping[str, float] = DEFAULT_PITCH_POSITIONS) -> float:
    """Natural key widths from the left edge of octave 0."""
    attrs = get_attributes(midi_number)
    return pitch_positions[attrs.pitch_name] + OCTAVE_WIDTH * attrs.octave


def relative_key_position(
    midi_number: int,
    first: int,
    pitch_positions: Mapping[str, float] = DEFAULT_PITCH_POSITIONS,
) -> float:
    """Natural key widths from the left edge of the range starting at first."""
    return absolute_key_position(midi_number, pitch_positions) - absolute_key_position(first, pitch_positions)


def key_geometry(
    midi_number: int,
    first: int,
    natural_key_width: float,
    accidental_width_ratio: float = DEFAULT_ACCIDENTAL_WIDTH_RATIO,
    pitch_positions: Mapping[str, float] = DEFAULT_PITCH_POSITIONS,
) -> KeyGeometry:
    """
    Compute a key's left edge and width.

    Args:
        midi_number: Key to place.
        first: First MIDI number of the range; its left edge is 0.
        natural_key_width: Width of one natural key as a fraction of the keyboard.
        accidental_width_ratio: Accidental key width relative to a natural key.
        pitch_positions: Per pitch class offsets within an octave.

    Returns:
        KeyGeometry with left and width as fractions of the keyboard width.
    """
    left = relative_key_position(midi_number, first, pitch_positions) * natural_key_width
    if get_attributes(midi_number).is_accidental:
        width = accidental_width_ratio * natural_key_width
    else:
        width = natural_key_width
    return KeyGeometry(left=left, width=width)


def ratio_to_percentage(ratio: float) -> str:
    return f"{ratio * 100}%"
