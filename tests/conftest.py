"""Shared fixtures for pianokeys tests."""

import os

import pytest

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pianokeys.keyboard import Keyboard
from pianokeys.models import KeyboardConfig, NoteRange


class RecordingSink:
    """Sink that records every note event in order."""

    def __init__(self):
        self.events: list[tuple[str, int]] = []

    def on_play(self, midi_number: int) -> None:
        self.events.append(("play", midi_number))

    def on_stop(self, midi_number: int) -> None:
        self.events.append(("stop", midi_number))

    @property
    def plays(self) -> list[int]:
        return [n for kind, n in self.events if kind == "play"]

    @property
    def stops(self) -> list[int]:
        return [n for kind, n in self.events if kind == "stop"]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_keyboard(sink):
    """Build a Keyboard over a range with config overrides."""

    def _make(first: int = 48, last: int = 60, **kwargs):
        extra = {k: kwargs.pop(k) for k in list(kwargs) if k in (
            "active_notes", "render_note_label", "on_key_mouse_enter",
            "on_key_mouse_leave", "on_click", "on_double_click", "shortcuts",
        )}
        config = KeyboardConfig(note_range=NoteRange(first=first, last=last), **kwargs)
        return Keyboard(config, sink, **extra)

    return _make
