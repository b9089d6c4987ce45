#!/usr/bin/env python3
"""
pianokeys demo launcher

Shows an interactive keyboard and logs the notes it plays.

Usage:
    python -m pianokeys.main [options]

Options:
    --first NOTE        First key, MIDI number or note name (default: c3)
    --last NOTE         Last key, MIDI number or note name (default: c5)
    --width PX          Fixed width in pixels (default: fill the window)
    --gliss             Sound keys while dragging across them
    --touch             Use touch events instead of mouse events
    --disabled          Render the keyboard inert
    --shortcuts ROW     Computer keyboard row: bottom, home, qwerty, none
    --config FILE       Load a JSON keyboard configuration
    --log-level LEVEL   Logging level (default: INFO)
"""

import argparse
import logging
import sys

from pydantic import ValidationError
from PySide6.QtWidgets import QApplication, QMainWindow

from .errors import PianoKeysError
from .keyboard import Keyboard, NoteLabelContext
from .midi_numbers import from_note
from .models import KeyboardConfig, NoteRange
from .shortcuts import ROWS, create_shortcuts, label_for
from .sinks import ActiveNoteTracker, LoggingSink
from .widget import PianoKeyboardWidget

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="pianokeys - interactive piano keyboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m pianokeys.main --first c3 --last c5 --gliss
  python -m pianokeys.main --first 48 --last 72 --width 800
  python -m pianokeys.main --config keyboard.json
        """
    )
    parser.add_argument(
        "--first", type=str, default="c3",
        help="First key as MIDI number or note name (default: c3)"
    )
    parser.add_argument(
        "--last", type=str, default="c5",
        help="Last key as MIDI number or note name (default: c5)"
    )
    parser.add_argument(
        "--width", type=float, default=None,
        help="Fixed width in pixels (default: fill the window)"
    )
    parser.add_argument("--gliss", action="store_true", help="Sound keys while dragging across them")
    parser.add_argument("--touch", action="store_true", help="Use touch events instead of mouse events")
    parser.add_argument("--disabled", action="store_true", help="Render the keyboard inert")
    parser.add_argument(
        "--shortcuts", choices=[*ROWS, "none"], default="home",
        help="Computer keyboard row used for shortcuts (default: home)"
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="JSON keyboard configuration; overrides the range and flag options"
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        help="Logging level (default: INFO)"
    )
    return parser.parse_args(argv)


def parse_note(value: str) -> int:
    """Accept either a MIDI number ('60') or a note name ('c4')."""
    value = value.strip()
    if value.lstrip("-").isdigit():
        return int(value)
    return from_note(value)


def build_config(args: argparse.Namespace) -> KeyboardConfig:
    if args.config:
        return KeyboardConfig.from_json_file(args.config)
    return KeyboardConfig(
        note_range=NoteRange(first=parse_note(args.first), last=parse_note(args.last)),
        width=args.width,
        gliss=args.gliss,
        use_touch_events=args.touch,
        disabled=args.disabled,
    )


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = build_config(args)
    except (PianoKeysError, ValidationError, OSError, ValueError) as e:
        logger.error("invalid keyboard configuration: %s", e)
        sys.exit(2)

    shortcuts = []
    if args.shortcuts != "none":
        shortcuts = create_shortcuts(config.note_range.first, config.note_range.last, ROWS[args.shortcuts])

    def render_label(context: NoteLabelContext):
        return label_for(shortcuts, context.midi_number)

    app = QApplication(sys.argv[:1])
    tracker = ActiveNoteTracker(LoggingSink())
    keyboard = Keyboard(config, tracker, render_note_label=render_label, shortcuts=shortcuts)
    widget = PianoKeyboardWidget(keyboard)
    tracker.on_change = widget.set_active_notes

    window = QMainWindow()
    window.setWindowTitle(f"pianokeys {config.note_range.first}-{config.note_range.last}")
    window.setCentralWidget(widget)
    if config.width is None:
        window.resize(widget.sizeHint())
    app.aboutToQuit.connect(tracker.stop_all)
    window.show()
    widget.setFocus()
    sys.exit(app.exec())


if __name__ == "__main__":
    run()
