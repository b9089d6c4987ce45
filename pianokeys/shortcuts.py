"""
Computer keyboard shortcuts for playing keys.

A row config lists, for each natural key, the character that plays it and
the characters for the accidental on either side. Shortcuts are assigned
upwards from the first note of the range.
"""

import logging
from typing import List

from pydantic import BaseModel

from .midi_numbers import get_attributes

logger = logging.getLogger(__name__)


class ShortcutKey(BaseModel):
    natural: str
    flat: str
    sharp: str


class KeyboardShortcut(BaseModel):
    key: str
    midi_number: int


def _row(entries: str) -> List[ShortcutKey]:
    return [ShortcutKey(natural=n, flat=f, sharp=s) for n, f, s in (item.split(" ") for item in entries.split("|"))]


BOTTOM_ROW = _row("z a s|x s d|c d f|v f g|b g h|n h j|m j k|, k l|. l ;|/ ; '")
HOME_ROW = _row("a q w|s w e|d e r|f r t|g t y|h y u|j u i|k i o|l o p|; p [|' [ ]")
QWERTY_ROW = _row("q 1 2|w 2 3|e 3 4|r 4 5|t 5 6|y 6 7|u 7 8|i 8 9|o 9 0|p 0 -|[ - =")

ROWS = {
    "bottom": BOTTOM_ROW,
    "home": HOME_ROW,
    "qwerty": QWERTY_ROW,
}


def create_shortcuts(first_note: int, last_note: int, keyboard_config: List[ShortcutKey]) -> List[KeyboardShortcut]:
    """
    Assign shortcut characters to MIDI numbers starting at first_note.

    Naturals take the row's natural character and advance the row; an
    accidental takes the flat character of the natural above it. Assignment
    stops at last_note or when the row runs out.
    """
    shortcuts: List[KeyboardShortcut] = []
    current = first_note
    index = 0
    while index < len(keyboard_config) and current <= last_note:
        key = keyboard_config[index]
        if get_attributes(current).is_accidental:
            shortcuts.append(KeyboardShortcut(key=key.flat, midi_number=current))
        else:
            shortcuts.append(KeyboardShortcut(key=key.natural, midi_number=current))
            index += 1
        current += 1
    if current <= last_note:
        logger.debug("shortcut row covers %d..%d of %d..%d", first_note, current - 1, first_note, last_note)
    return shortcuts


def shortcut_map(shortcuts: List[KeyboardShortcut]) -> dict[str, int]:
    """Character -> MIDI number lookup."""
    return {s.key: s.midi_number for s in shortcuts}


def label_for(shortcuts: List[KeyboardShortcut], midi_number: int) -> str | None:
    for s in shortcuts:
        if s.midi_number == midi_number:
            return s.key
    return None
