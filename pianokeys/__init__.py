"""
pianokeys - interactive piano keyboard widget

Lays out piano keys for a range of MIDI numbers and turns mouse, touch and
computer keyboard input into note-on/note-off calls on a consumer supplied
sink. The model (MidiNumbers, layout, Key, Keyboard) has no GUI dependency;
PianoKeyboardWidget renders it with PySide6.
"""

__version__ = "0.1.0"

from .errors import (
    PianoKeysError,
    NoteRangeError,
    InvalidRangeShape,
    InvalidRangeValue,
    InvalidRangeOrder,
    InvalidNoteName,
)
from .gestures import Effect, Gesture, KeyState, PointerState, transition
from .key import Key, KeyCallbacks, KeyEnterInfo, KeyView
from .keyboard import Keyboard, KeyboardView, NoteLabelContext
from .layout import DEFAULT_PITCH_POSITIONS, KeyGeometry, key_geometry
from .midi_numbers import NATURAL_MIDI_NUMBERS, NoteAttributes, from_note, get_attributes
from .models import KeyboardConfig, NoteRange
from .shortcuts import BOTTOM_ROW, HOME_ROW, QWERTY_ROW, KeyboardShortcut, create_shortcuts
from .sinks import ActiveNoteTracker, CallbackSink, LoggingSink, NoteInputSink

__all__ = [
    "PianoKeysError",
    "NoteRangeError",
    "InvalidRangeShape",
    "InvalidRangeValue",
    "InvalidRangeOrder",
    "InvalidNoteName",
    "Effect",
    "Gesture",
    "KeyState",
    "PointerState",
    "transition",
    "Key",
    "KeyCallbacks",
    "KeyEnterInfo",
    "KeyView",
    "Keyboard",
    "KeyboardView",
    "NoteLabelContext",
    "DEFAULT_PITCH_POSITIONS",
    "KeyGeometry",
    "key_geometry",
    "NATURAL_MIDI_NUMBERS",
    "NoteAttributes",
    "from_note",
    "get_attributes",
    "KeyboardConfig",
    "NoteRange",
    "BOTTOM_ROW",
    "HOME_ROW",
    "QWERTY_ROW",
    "KeyboardShortcut",
    "create_shortcuts",
    "ActiveNoteTracker",
    "CallbackSink",
    "LoggingSink",
    "NoteInputSink",
]
