"""
Exception types raised while configuring a keyboard.

All of these surface at configuration time. Gesture handling and geometry
never raise for a validated configuration.
"""


class PianoKeysError(Exception):
    """Base class for every error raised by pianokeys."""


class NoteRangeError(PianoKeysError):
    """The configured note range cannot be laid out."""


class InvalidRangeShape(NoteRangeError):
    """note_range is missing its first or last value."""

    def __init__(self, field_name: str = "note_range"):
        super().__init__(
            f"Invalid {field_name}: {field_name} must have both a .first and a .last value."
        )


class InvalidRangeValue(NoteRangeError):
    """first or last is not a natural MIDI number."""

    def __init__(self, value, field_name: str = "note_range"):
        self.value = value
        super().__init__(
            f"Invalid {field_name}: {value!r} is not a valid MIDI number, "
            f"or is an accidental (sharp or flat note). {field_name} values must be natural notes."
        )


class InvalidRangeOrder(NoteRangeError):
    """first is not strictly below last."""

    def __init__(self, first: int, last: int, field_name: str = "note_range"):
        self.first = first
        self.last = last
        super().__init__(
            f"Invalid {field_name}: {field_name}.first ({first}) must be smaller than "
            f"{field_name}.last ({last})."
        )


class InvalidNoteName(PianoKeysError, ValueError):
    """A note name such as 'c4' or 'F#3' could not be parsed."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid note name: {name!r}")
