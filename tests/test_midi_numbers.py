"""
Tests for MIDI number attributes and note name parsing.
"""

import pytest

from pianokeys.errors import InvalidNoteName
from pianokeys.midi_numbers import (
    NATURAL_MIDI_NUMBERS,
    PITCH_NAMES,
    from_note,
    get_attributes,
    is_natural,
)


class TestGetAttributes:
    """Test get_attributes."""

    def test_middle_c(self):
        attrs = get_attributes(60)
        assert attrs.pitch_name == "C"
        assert attrs.octave == 4
        assert attrs.is_accidental is False
        assert attrs.note == "c4"

    def test_accidental(self):
        attrs = get_attributes(61)
        assert attrs.pitch_name == "Db"
        assert attrs.is_accidental is True

    def test_lowest_and_highest(self):
        assert (get_attributes(0).pitch_name, get_attributes(0).octave) == ("C", -1)
        assert (get_attributes(127).pitch_name, get_attributes(127).octave) == ("G", 9)

    def test_repeated_calls_are_identical(self):
        assert get_attributes(73) == get_attributes(73)

    @pytest.mark.parametrize("midi_number", [-25, -1, 0, 11, 59, 60, 127, 300])
    def test_octave_shift(self, midi_number):
        """Adding 12 keeps the pitch name and raises the octave by one."""
        a = get_attributes(midi_number)
        b = get_attributes(midi_number + 12)
        assert b.pitch_name == a.pitch_name
        assert b.octave == a.octave + 1
        assert b.is_accidental == a.is_accidental

    def test_negative_numbers_use_floor_semantics(self):
        attrs = get_attributes(-1)
        assert attrs.pitch_name == "B"
        assert attrs.octave == -2

    def test_five_accidentals_per_octave(self):
        flags = [get_attributes(n).is_accidental for n in range(60, 72)]
        assert sum(flags) == 5
        assert [PITCH_NAMES[i] for i, f in enumerate(flags) if f] == ["Db", "Eb", "Gb", "Ab", "Bb"]


class TestNaturalMidiNumbers:
    """Test the natural number table and is_natural."""

    def test_covers_full_range(self):
        assert NATURAL_MIDI_NUMBERS[0] == 0
        assert NATURAL_MIDI_NUMBERS[-1] == 127
        assert len(NATURAL_MIDI_NUMBERS) == 75

    def test_contains_no_accidentals(self):
        assert not any(get_attributes(n).is_accidental for n in NATURAL_MIDI_NUMBERS)

    def test_is_natural(self):
        assert is_natural(60)
        assert not is_natural(61)
        assert not is_natural(128)
        assert not is_natural(-12)

    def test_is_natural_rejects_non_ints(self):
        assert not is_natural(60.0)
        assert not is_natural("60")
        assert not is_natural(True)
        assert not is_natural(None)


class TestFromNote:
    """Test note name parsing."""

    @pytest.mark.parametrize("name,expected", [
        ("c4", 60),
        ("C4", 60),
        ("c#4", 61),
        ("Db4", 61),
        ("bb3", 58),
        ("b3", 59),
        ("a0", 21),
        ("c-1", 0),
        ("g9", 127),
    ])
    def test_valid_names(self, name, expected):
        assert from_note(name) == expected

    def test_round_trips_with_attributes(self):
        assert from_note(get_attributes(70).note) == 70

    @pytest.mark.parametrize("name", ["", "h4", "c", "e#4", "cb", "c4x", 60])
    def test_invalid_names(self, name):
        with pytest.raises(InvalidNoteName):
            from_note(name)

    def test_invalid_name_is_value_error(self):
        with pytest.raises(ValueError):
            from_note("nope")
