import json
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidRangeOrder, InvalidRangeShape, InvalidRangeValue
from .layout import DEFAULT_ACCIDENTAL_WIDTH_RATIO, DEFAULT_PITCH_POSITIONS
from .midi_numbers import PITCH_NAMES, is_natural


class NoteRange(BaseModel):
    """Inclusive range of keys. Both ends must be natural MIDI numbers."""

    model_config = ConfigDict(frozen=True)

    # Validated by hand below so the typed range errors reach the caller
    first: Any
    last: Any

    @model_validator(mode="before")
    @classmethod
    def _check_shape(cls, data: Any) -> Any:
        if isinstance(data, (tuple, list)) and len(data) == 2:
            data = {"first": data[0], "last": data[1]}
        if not isinstance(data, dict) and not isinstance(data, NoteRange):
            raise InvalidRangeShape()
        if isinstance(data, dict) and (data.get("first") is None or data.get("last") is None):
            raise InvalidRangeShape()
        return data

    @model_validator(mode="after")
    def _check_values(self) -> "NoteRange":
        for value in (self.first, self.last):
            if not is_natural(value):
                raise InvalidRangeValue(value)
        if self.first >= self.last:
            raise InvalidRangeOrder(self.first, self.last)
        return self

    def __contains__(self, midi_number: int) -> bool:
        return self.first <= midi_number <= self.last


class KeyboardConfig(BaseModel):
    """Static keyboard configuration. Changing any of it means a full relayout."""

    note_range: NoteRange
    key_width_to_height: float = Field(default=0.33, gt=0)
    # Fixed pixel width; None fills the parent
    width: Optional[float] = Field(default=None, gt=0)
    disabled: bool = False
    gliss: bool = False
    use_touch_events: bool = False
    accidental_width_ratio: float = Field(default=DEFAULT_ACCIDENTAL_WIDTH_RATIO, gt=0, le=1)
    pitch_positions: dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_PITCH_POSITIONS))
    class_name: Optional[str] = None

    @field_validator("pitch_positions")
    @classmethod
    def _check_pitch_positions(cls, value: dict[str, float]) -> dict[str, float]:
        missing = [name for name in PITCH_NAMES if name not in value]
        if missing:
            raise ValueError(f"pitch_positions is missing entries for {', '.join(missing)}")
        return value

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "KeyboardConfig":
        with open(path, "r", encoding="utf-8") as fh:
            return cls.model_validate(json.load(fh))
