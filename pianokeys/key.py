"""
A single piano key: geometry, visual state and its gesture state machine.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .gestures import Effect, Gesture, KeyState, PointerState, transition
from .layout import DEFAULT_ACCIDENTAL_WIDTH_RATIO, DEFAULT_PITCH_POSITIONS, KeyGeometry, key_geometry, ratio_to_percentage
from .midi_numbers import MIDDLE_C, get_attributes
from .models import NoteRange
from .sinks import NoteInputSink

logger = logging.getLogger(__name__)

CLASS_PREFIX = "PianoKeys__Key"


@dataclass(frozen=True)
class KeyEnterInfo:
    """Passed to on_key_mouse_enter when the pointer enters a key."""

    accidental: bool
    left: str
    midi_number: int
    width: str


@dataclass(frozen=True)
class KeyView:
    """Render description of one key."""

    midi_number: int
    class_names: tuple[str, ...]
    left: str
    width: str
    geometry: KeyGeometry
    accidental: bool
    active: bool
    disabled: bool
    label: Any = None

    @property
    def class_name(self) -> str:
        return " ".join(self.class_names)


@dataclass
class KeyCallbacks:
    """Optional auxiliary callbacks shared by every key of a keyboard."""

    on_key_mouse_enter: Optional[Callable[[KeyEnterInfo], None]] = None
    on_key_mouse_leave: Optional[Callable[[int], None]] = None
    on_click: Optional[Callable[[int], None]] = None
    on_double_click: Optional[Callable[[int], None]] = None


class Key:
    def __init__(
        self,
        midi_number: int,
        note_range: NoteRange,
        natural_key_width: float,
        sink: NoteInputSink,
        *,
        pointer: Optional[PointerState] = None,
        accidental: Optional[bool] = None,
        active: bool = False,
        disabled: bool = False,
        gliss: bool = False,
        use_touch_events: bool = False,
        accidental_width_ratio: float = DEFAULT_ACCIDENTAL_WIDTH_RATIO,
        pitch_positions: Mapping[str, float] = DEFAULT_PITCH_POSITIONS,
        callbacks: Optional[KeyCallbacks] = None,
    ):
        self.midi_number = midi_number
        self.note_range = note_range
        self.natural_key_width = natural_key_width
        self.sink = sink
        self.pointer = pointer if pointer is not None else PointerState()
        self.accidental = get_attributes(midi_number).is_accidental if accidental is None else accidental
        self.active = active
        self.disabled = disabled
        self.gliss = gliss
        self.use_touch_events = use_touch_events
        self.callbacks = callbacks or KeyCallbacks()
        self.state = KeyState.IDLE
        self.geometry = key_geometry(
            midi_number,
            note_range.first,
            natural_key_width,
            accidental_width_ratio,
            pitch_positions,
        )

    @property
    def left(self) -> str:
        return ratio_to_percentage(self.geometry.left)

    @property
    def width(self) -> str:
        return ratio_to_percentage(self.geometry.width)

    @property
    def is_sounding(self) -> bool:
        return self.state is KeyState.SOUNDING

    def handle_gesture(self, gesture: Gesture) -> tuple[Effect, ...]:
        """Run one gesture through the state machine and fire its callbacks."""
        result = transition(
            self.state,
            gesture,
            dragging=self.pointer.is_down,
            gliss=self.gliss,
            use_touch_events=self.use_touch_events,
            disabled=self.disabled,
        )
        if result.state is not self.state:
            logger.debug("key %d: %s -> %s on %s", self.midi_number, self.state.value, result.state.value, gesture.value)
        self.state = result.state
        for effect in result.effects:
            self._run(effect)
        return result.effects

    def _run(self, effect: Effect):
        cb = self.callbacks
        if effect is Effect.PLAY:
            self.sink.on_play(self.midi_number)
        elif effect is Effect.STOP:
            self.sink.on_stop(self.midi_number)
        elif effect is Effect.KEY_LEAVE:
            if cb.on_key_mouse_leave is not None:
                cb.on_key_mouse_leave(self.midi_number)
        elif effect is Effect.KEY_ENTER:
            if cb.on_key_mouse_enter is not None:
                cb.on_key_mouse_enter(KeyEnterInfo(
                    accidental=self.accidental,
                    left=self.left,
                    midi_number=self.midi_number,
                    width=self.width,
                ))
        elif effect is Effect.CLICK:
            if cb.on_click is not None:
                cb.on_click(self.midi_number)
        elif effect is Effect.DOUBLE_CLICK:
            if cb.on_double_click is not None:
                cb.on_double_click(self.midi_number)

    def class_names(self) -> tuple[str, ...]:
        names = [CLASS_PREFIX, f"{CLASS_PREFIX}--{'accidental' if self.accidental else 'natural'}"]
        if self.disabled:
            names.append(f"{CLASS_PREFIX}--disabled")
        if self.active:
            names.append(f"{CLASS_PREFIX}--active")
        if self.midi_number == MIDDLE_C:
            names.append(f"{CLASS_PREFIX}--middleC")
        return tuple(names)

    def view(self, label: Any = None) -> KeyView:
        return KeyView(
            midi_number=self.midi_number,
            class_names=self.class_names(),
            left=self.left,
            width=self.width,
            geometry=self.geometry,
            accidental=self.accidental,
            active=self.active,
            disabled=self.disabled,
            label=label,
        )

    def __repr__(self) -> str:
        return f"Key({self.midi_number}, state={self.state.value}, left={self.geometry.left:.4f})"
