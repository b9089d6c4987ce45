"""
Tests for configuration models and range validation.
"""

import json

import pytest
from pydantic import ValidationError

from pianokeys.errors import (
    InvalidRangeOrder,
    InvalidRangeShape,
    InvalidRangeValue,
    NoteRangeError,
)
from pianokeys.layout import DEFAULT_PITCH_POSITIONS
from pianokeys.models import KeyboardConfig, NoteRange


class TestNoteRange:
    """Test NoteRange validation."""

    def test_valid_range(self):
        r = NoteRange(first=60, last=72)
        assert (r.first, r.last) == (60, 72)

    def test_accidental_first(self):
        with pytest.raises(InvalidRangeValue):
            NoteRange(first=61, last=72)

    def test_accidental_last(self):
        with pytest.raises(InvalidRangeValue):
            NoteRange(first=60, last=70)

    def test_out_of_midi_range(self):
        with pytest.raises(InvalidRangeValue):
            NoteRange(first=60, last=132)

    def test_non_integer_value(self):
        with pytest.raises(InvalidRangeValue):
            NoteRange(first="60", last=72)

    def test_reversed(self):
        with pytest.raises(InvalidRangeOrder):
            NoteRange(first=72, last=60)

    def test_equal_ends(self):
        with pytest.raises(InvalidRangeOrder):
            NoteRange(first=60, last=60)

    def test_missing_last(self):
        with pytest.raises(InvalidRangeShape):
            NoteRange.model_validate({"first": 60})

    def test_none_value(self):
        with pytest.raises(InvalidRangeShape):
            NoteRange(first=None, last=72)

    def test_zero_is_a_valid_first_note(self):
        assert NoteRange(first=0, last=12).first == 0

    def test_accepts_pair(self):
        assert NoteRange.model_validate((48, 60)) == NoteRange(first=48, last=60)

    def test_errors_share_base(self):
        with pytest.raises(NoteRangeError, match="must be smaller"):
            NoteRange(first=72, last=60)

    def test_contains(self):
        r = NoteRange(first=48, last=60)
        assert 49 in r
        assert 61 not in r

    def test_frozen(self):
        r = NoteRange(first=48, last=60)
        with pytest.raises(ValidationError):
            r.first = 50


class TestKeyboardConfig:
    """Test KeyboardConfig defaults and validation."""

    def test_defaults(self):
        cfg = KeyboardConfig(note_range=NoteRange(first=48, last=60))
        assert cfg.key_width_to_height == 0.33
        assert cfg.accidental_width_ratio == 0.65
        assert cfg.width is None
        assert cfg.disabled is False
        assert cfg.gliss is False
        assert cfg.use_touch_events is False
        assert cfg.pitch_positions == DEFAULT_PITCH_POSITIONS

    def test_default_pitch_positions_are_copied(self):
        cfg = KeyboardConfig(note_range=NoteRange(first=48, last=60))
        cfg.pitch_positions["C"] = 0.5
        assert DEFAULT_PITCH_POSITIONS["C"] == 0

    def test_nested_range_errors_propagate(self):
        with pytest.raises(InvalidRangeValue):
            KeyboardConfig(note_range={"first": 61, "last": 72})

    def test_incomplete_pitch_positions(self):
        with pytest.raises(ValidationError):
            KeyboardConfig(note_range=NoteRange(first=48, last=60), pitch_positions={"C": 0})

    @pytest.mark.parametrize("field,value", [
        ("width", 0),
        ("key_width_to_height", -1),
        ("accidental_width_ratio", 1.5),
    ])
    def test_numeric_bounds(self, field, value):
        with pytest.raises(ValidationError):
            KeyboardConfig(note_range=NoteRange(first=48, last=60), **{field: value})

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "keyboard.json"
        path.write_text(json.dumps({
            "note_range": {"first": 21, "last": 108},
            "width": 1200,
            "gliss": True,
        }))
        cfg = KeyboardConfig.from_json_file(path)
        assert cfg.note_range == NoteRange(first=21, last=108)
        assert cfg.width == 1200
        assert cfg.gliss is True
