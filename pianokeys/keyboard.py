"""
Keyboard composition.

Builds one Key per MIDI number in the configured range, computes the shared
geometry and routes gestures to the right key. The keyboard holds no
per-key interaction state; each Key owns its own.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Union

from .gestures import Effect, Gesture, PointerState
from .key import Key, KeyCallbacks, KeyView
from .midi_numbers import get_attributes
from .models import KeyboardConfig, NoteRange
from .shortcuts import KeyboardShortcut, ShortcutKey, create_shortcuts, shortcut_map
from .sinks import NoteInputSink

logger = logging.getLogger(__name__)

KEYBOARD_CLASS = "PianoKeys__Keyboard"

# Accidental keys cover the top part of the keyboard height
ACCIDENTAL_HEIGHT_RATIO = 0.65


@dataclass(frozen=True)
class NoteLabelContext:
    is_active: bool
    is_accidental: bool
    midi_number: int


@dataclass(frozen=True)
class KeyboardView:
    """Render description of the whole keyboard."""

    class_name: str
    width: Optional[float]
    height: Optional[float]
    keys: tuple[KeyView, ...]

    @property
    def style(self) -> dict[str, str]:
        return {
            "width": "100%" if self.width is None else f"{self.width}px",
            "height": "100%" if self.height is None else f"{self.height}px",
        }


def _no_label(context: NoteLabelContext) -> Any:
    return None


class Keyboard:
    def __init__(
        self,
        config: KeyboardConfig,
        sink: NoteInputSink,
        *,
        active_notes: Iterable[int] = (),
        render_note_label: Callable[[NoteLabelContext], Any] = _no_label,
        on_key_mouse_enter=None,
        on_key_mouse_leave=None,
        on_click=None,
        on_double_click=None,
        shortcuts: Optional[List[KeyboardShortcut]] = None,
    ):
        self.sink = sink
        self.render_note_label = render_note_label
        self.callbacks = KeyCallbacks(
            on_key_mouse_enter=on_key_mouse_enter,
            on_key_mouse_leave=on_key_mouse_leave,
            on_click=on_click,
            on_double_click=on_double_click,
        )
        self.pointer = PointerState()
        self.hovered: Optional[int] = None
        self.active_notes: frozenset[int] = frozenset(active_notes)
        self._shortcuts: dict[str, int] = {}
        self._shortcut_row: Optional[List[ShortcutKey]] = None
        self.keys: dict[int, Key] = {}
        self.config = config
        self._build()
        if shortcuts is not None:
            self.set_shortcuts(shortcuts)

    # --- Range helpers ---
    @property
    def note_range(self) -> NoteRange:
        return self.config.note_range

    def midi_numbers(self) -> List[int]:
        return list(range(self.note_range.first, self.note_range.last + 1))

    def natural_key_count(self) -> int:
        return sum(1 for n in self.midi_numbers() if not get_attributes(n).is_accidental)

    def natural_key_width(self) -> float:
        """Width of one natural key as a ratio of the keyboard width."""
        return 1 / self.natural_key_count()

    def dimensions(self) -> tuple[Optional[float], Optional[float]]:
        """Pixel (width, height); (None, None) means fill the parent."""
        width = self.config.width
        if not width:
            return None, None
        key_width = width * self.natural_key_width()
        return float(width), key_width / self.config.key_width_to_height

    # --- Construction ---
    def _build(self):
        cfg = self.config
        natural_key_width = self.natural_key_width()
        keys = {}
        for midi_number in self.midi_numbers():
            accidental = get_attributes(midi_number).is_accidental
            keys[midi_number] = Key(
                midi_number,
                cfg.note_range,
                natural_key_width,
                self.sink,
                pointer=self.pointer,
                accidental=accidental,
                active=self._is_active(midi_number),
                disabled=cfg.disabled,
                gliss=cfg.gliss,
                use_touch_events=cfg.use_touch_events,
                accidental_width_ratio=cfg.accidental_width_ratio,
                pitch_positions=cfg.pitch_positions,
                callbacks=self.callbacks,
            )
        self.keys = keys
        logger.debug(
            "laid out %d keys (%d natural) for range %d..%d",
            len(keys), self.natural_key_count(), cfg.note_range.first, cfg.note_range.last,
        )

    def reconfigure(self, config: KeyboardConfig):
        """Replace the configuration and rebuild every key."""
        for key in self.keys.values():
            if key.is_sounding:
                self.sink.on_stop(key.midi_number)
        self.pointer.release()
        self.hovered = None
        self.config = config
        self._build()
        if self._shortcut_row is not None:
            # Row shortcuts start again from the new first note
            self.set_shortcuts(self._shortcut_row)
        elif self._shortcuts:
            self._shortcuts = {c: n for c, n in self._shortcuts.items() if n in self.keys}

    def _is_active(self, midi_number: int) -> bool:
        return not self.config.disabled and midi_number in self.active_notes

    def set_active_notes(self, notes: Iterable[int]):
        self.active_notes = frozenset(notes)
        for midi_number, key in self.keys.items():
            key.active = self._is_active(midi_number)

    # --- Rendering ---
    def render(self) -> KeyboardView:
        width, height = self.dimensions()
        views = []
        for midi_number, key in self.keys.items():
            label = None
            if not self.config.disabled:
                label = self.render_note_label(NoteLabelContext(
                    is_active=key.active,
                    is_accidental=key.accidental,
                    midi_number=midi_number,
                ))
            views.append(key.view(label))
        class_name = KEYBOARD_CLASS if not self.config.class_name else f"{KEYBOARD_CLASS} {self.config.class_name}"
        return KeyboardView(class_name=class_name, width=width, height=height, keys=tuple(views))

    def key_at(self, x: float, y: float) -> Optional[int]:
        """
        Hit test a point given as fractions of the keyboard width and height.

        Accidentals sit above naturals and only cover the top part of the
        height, so they are checked first.
        """
        if not (0 <= x < 1 and 0 <= y <= 1):
            return None
        if y <= ACCIDENTAL_HEIGHT_RATIO:
            for key in self.keys.values():
                if key.accidental and key.geometry.left <= x < key.geometry.right:
                    return key.midi_number
        for key in self.keys.values():
            if not key.accidental and key.geometry.left <= x < key.geometry.right:
                return key.midi_number
        return None

    # --- Gesture routing ---
    def dispatch(self, midi_number: int, gesture: Gesture) -> tuple[Effect, ...]:
        """Send a gesture to one key, keeping the shared pointer state current."""
        key = self.keys[midi_number]
        if gesture in (Gesture.MOUSE_DOWN, Gesture.TOUCH_START):
            self.pointer.press(midi_number)
        effects = key.handle_gesture(gesture)
        if gesture in (Gesture.MOUSE_UP, Gesture.TOUCH_END, Gesture.TOUCH_CANCEL):
            self.pointer.release()
        return effects

    def pointer_moved_to(self, midi_number: Optional[int]):
        """Turn pointer motion into leave/enter gestures for the keys crossed."""
        if midi_number == self.hovered:
            return
        previous = self.hovered
        self.hovered = midi_number
        if previous is not None and previous in self.keys:
            self.keys[previous].handle_gesture(Gesture.MOUSE_LEAVE)
        if midi_number is not None:
            effects = self.keys[midi_number].handle_gesture(Gesture.MOUSE_ENTER)
            if Effect.PLAY in effects:
                logger.debug("glissando from %s to %d", self.pointer.origin, midi_number)

    def release_pointer(self):
        """Pointer released outside every key."""
        self.pointer.release()

    def sounding_notes(self) -> List[int]:
        return [n for n, key in self.keys.items() if key.is_sounding]

    # --- Shortcuts ---
    def set_shortcuts(self, shortcuts: Union[List[KeyboardShortcut], List[ShortcutKey]]):
        """Install computer keyboard shortcuts, either explicit or a row config."""
        self._shortcut_row = None
        if shortcuts and isinstance(shortcuts[0], ShortcutKey):
            self._shortcut_row = list(shortcuts)
            shortcuts = create_shortcuts(self.note_range.first, self.note_range.last, shortcuts)
        mapping = shortcut_map(shortcuts)
        ignored = [c for c, n in mapping.items() if n not in self.keys]
        if ignored:
            logger.warning("ignoring shortcuts outside the note range: %s", ", ".join(ignored))
        self._shortcuts = {c: n for c, n in mapping.items() if n in self.keys}

    @property
    def shortcuts(self) -> dict[str, int]:
        return dict(self._shortcuts)

    def shortcut_down(self, char: str) -> bool:
        """Play the key bound to char. Returns False if nothing is bound."""
        midi_number = self._shortcuts.get(char.lower())
        if midi_number is None:
            return False
        self.keys[midi_number].handle_gesture(Gesture.SHORTCUT_DOWN)
        return True

    def shortcut_up(self, char: str) -> bool:
        midi_number = self._shortcuts.get(char.lower())
        if midi_number is None:
            return False
        self.keys[midi_number].handle_gesture(Gesture.SHORTCUT_UP)
        return True
