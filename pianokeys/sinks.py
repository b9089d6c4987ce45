"""
Note input sinks.

A sink receives note-on/note-off requests from the keyboard. What it does
with them (synthesis, MIDI, recording) is up to the consumer.
"""

import logging
from typing import Callable, Iterable, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class NoteInputSink(Protocol):
    def on_play(self, midi_number: int) -> None: ...

    def on_stop(self, midi_number: int) -> None: ...


class CallbackSink:
    """Adapts a pair of plain callables to the NoteInputSink interface."""

    def __init__(self, on_play_note_input: Callable[[int], None], on_stop_note_input: Callable[[int], None]):
        self._on_play = on_play_note_input
        self._on_stop = on_stop_note_input

    def on_play(self, midi_number: int) -> None:
        self._on_play(midi_number)

    def on_stop(self, midi_number: int) -> None:
        self._on_stop(midi_number)


class LoggingSink:
    """Sink that only logs, handy for trying the widget without a synth."""

    def __init__(self, level: int = logging.INFO):
        self.level = level

    def on_play(self, midi_number: int) -> None:
        logger.log(self.level, "note on %d", midi_number)

    def on_stop(self, midi_number: int) -> None:
        logger.log(self.level, "note off %d", midi_number)


class ActiveNoteTracker:
    """
    Forwarding sink that keeps the set of sounding notes.

    Useful when the consumer wants key highlighting to follow direct input
    without maintaining active notes itself. `on_change` is called with a
    copy of the set after every update.
    """

    def __init__(self, inner: Optional[NoteInputSink] = None, on_change: Optional[Callable[[frozenset[int]], None]] = None):
        self.inner = inner
        self.on_change = on_change
        self._notes: set[int] = set()

    @property
    def notes(self) -> frozenset[int]:
        return frozenset(self._notes)

    def on_play(self, midi_number: int) -> None:
        self._notes.add(midi_number)
        if self.inner is not None:
            self.inner.on_play(midi_number)
        self._changed()

    def on_stop(self, midi_number: int) -> None:
        self._notes.discard(midi_number)
        if self.inner is not None:
            self.inner.on_stop(midi_number)
        self._changed()

    def stop_all(self, notes: Optional[Iterable[int]] = None):
        """Stop every tracked note (or just the given ones)."""
        for note in sorted(self._notes if notes is None else set(notes) & self._notes):
            self.on_stop(note)

    def _changed(self):
        if self.on_change is not None:
            self.on_change(self.notes)
