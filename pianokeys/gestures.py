"""
Gesture state machine for a single key.

A key is either idle or sounding. Gestures move it between the two and
produce effects (play, stop and the auxiliary callbacks) that the owning Key
turns into callback invocations. Only one input family is live at a time:
mouse gestures when touch mode is off, touch gestures when it is on, so
devices that synthesize mouse events from taps never fire a note twice.
"""

from dataclasses import dataclass
from enum import Enum


class KeyState(Enum):
    """Interaction state of one key."""

    IDLE = "idle"
    SOUNDING = "sounding"


class Gesture(Enum):
    """Input events a key can receive."""

    MOUSE_DOWN = "mouse_down"
    MOUSE_UP = "mouse_up"
    MOUSE_ENTER = "mouse_enter"
    MOUSE_LEAVE = "mouse_leave"
    TOUCH_START = "touch_start"
    TOUCH_END = "touch_end"
    TOUCH_CANCEL = "touch_cancel"
    DOUBLE_CLICK = "double_click"
    SHORTCUT_DOWN = "shortcut_down"
    SHORTCUT_UP = "shortcut_up"


class Effect(Enum):
    """Side effects requested by a transition, in invocation order."""

    PLAY = "play"
    STOP = "stop"
    KEY_ENTER = "key_enter"
    KEY_LEAVE = "key_leave"
    CLICK = "click"
    DOUBLE_CLICK = "double_click"


MOUSE_GESTURES = frozenset({Gesture.MOUSE_DOWN, Gesture.MOUSE_UP, Gesture.MOUSE_ENTER, Gesture.MOUSE_LEAVE})
TOUCH_GESTURES = frozenset({Gesture.TOUCH_START, Gesture.TOUCH_END, Gesture.TOUCH_CANCEL})


@dataclass(frozen=True)
class Transition:
    state: KeyState
    effects: tuple[Effect, ...] = ()


class PointerState:
    """
    Whether a pointer is currently held down anywhere on the keyboard.

    Shared by every key of one keyboard. Set on pointer-down, cleared on
    pointer-up or cancel wherever it happens; glissando reads it on enter.
    """

    def __init__(self):
        self.is_down = False
        self.origin: int | None = None

    def press(self, midi_number: int | None = None):
        self.is_down = True
        self.origin = midi_number

    def release(self):
        self.is_down = False
        self.origin = None

    def __repr__(self) -> str:
        return f"PointerState(is_down={self.is_down}, origin={self.origin})"


def _release(state: KeyState) -> Transition:
    if state is KeyState.SOUNDING:
        return Transition(KeyState.IDLE, (Effect.STOP, Effect.KEY_LEAVE))
    return Transition(KeyState.IDLE)


def transition(
    state: KeyState,
    gesture: Gesture,
    *,
    dragging: bool = False,
    gliss: bool = False,
    use_touch_events: bool = False,
    disabled: bool = False,
) -> Transition:
    """
    Apply one gesture to a key.

    Args:
        state: Current key state.
        gesture: Incoming gesture.
        dragging: Whether a pointer is held down somewhere on the keyboard.
        gliss: Whether dragging across keys should sound them.
        use_touch_events: Select touch handlers instead of mouse handlers.
        disabled: Disabled keys ignore every gesture.

    Returns:
        The new state and the effects to run, in order.
    """
    if disabled:
        return Transition(state)

    if gesture is Gesture.DOUBLE_CLICK:
        return Transition(state, (Effect.DOUBLE_CLICK,))

    if gesture is Gesture.SHORTCUT_DOWN:
        if state is KeyState.IDLE:
            return Transition(KeyState.SOUNDING, (Effect.PLAY,))
        return Transition(state)
    if gesture is Gesture.SHORTCUT_UP:
        if state is KeyState.SOUNDING:
            return Transition(KeyState.IDLE, (Effect.STOP,))
        return Transition(state)

    if gesture in TOUCH_GESTURES:
        if not use_touch_events:
            return Transition(state)
        if gesture is Gesture.TOUCH_START:
            if state is KeyState.IDLE:
                return Transition(KeyState.SOUNDING, (Effect.PLAY,))
            return Transition(state)
        return _release(state)

    # Mouse gestures. Click and hover callbacks fire in both modes; notes only
    # sound through the mouse when touch mode is off.
    if gesture is Gesture.MOUSE_UP:
        if use_touch_events:
            return Transition(state, (Effect.CLICK,))
        released = _release(state)
        return Transition(released.state, (Effect.CLICK,) + released.effects)

    if gesture is Gesture.MOUSE_ENTER:
        if not use_touch_events and gliss and dragging:
            # Re-entering a key that is already sounding retriggers it
            return Transition(KeyState.SOUNDING, (Effect.KEY_ENTER, Effect.PLAY))
        return Transition(state, (Effect.KEY_ENTER,))

    if use_touch_events:
        # Hover callbacks stay paired; the mouse never stops a touch note
        if gesture is Gesture.MOUSE_LEAVE:
            return Transition(state, (Effect.KEY_LEAVE,))
        return Transition(state)

    if gesture is Gesture.MOUSE_DOWN:
        if state is KeyState.IDLE:
            return Transition(KeyState.SOUNDING, (Effect.PLAY,))
        return Transition(state)

    if gesture is Gesture.MOUSE_LEAVE:
        if state is KeyState.SOUNDING:
            return _release(state)
        return Transition(KeyState.IDLE, (Effect.KEY_LEAVE,))

    raise ValueError(f"Unhandled gesture: {gesture}")
