from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import Qt, QEvent, QPointF, QRectF, QSize
from PySide6.QtGui import QColor, QEventPoint, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from .gestures import Gesture
from .keyboard import ACCIDENTAL_HEIGHT_RATIO, Keyboard
from .key import KeyView


@dataclass
class KeyTheme:
    """Colors for each key class modifier."""

    natural: str = "#f8f8f8"
    accidental: str = "#1a1a1a"
    active_natural: str = "#6bb8ff"
    active_accidental: str = "#2f82e6"
    disabled_natural: str = "#d6d6d6"
    disabled_accidental: str = "#5a5a5a"
    border: str = "#888888"
    middle_c_marker: str = "#61b3ff"
    label_natural: str = "#222222"
    label_accidental: str = "#eaeaea"

    def fill_for(self, view: KeyView) -> str:
        if view.disabled:
            return self.disabled_accidental if view.accidental else self.disabled_natural
        if view.active:
            return self.active_accidental if view.accidental else self.active_natural
        return self.accidental if view.accidental else self.natural


class PianoKeyboardWidget(QWidget):
    """
    Paints a Keyboard and feeds it pointer, touch and key events.

    Keys are painted, not child widgets, so hit testing goes through
    Keyboard.key_at and pointer motion is turned into enter/leave gestures
    here. With no fixed width configured the widget expands to its parent.
    """

    def __init__(self, keyboard: Keyboard, theme: Optional[KeyTheme] = None, parent=None):
        super().__init__(parent)
        self.keyboard = keyboard
        self.theme = theme or KeyTheme()
        self._touch_points: dict[int, int] = {}
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAttribute(Qt.WA_AcceptTouchEvents, keyboard.config.use_touch_events)
        self._apply_size()

    def _apply_size(self):
        width, height = self.keyboard.dimensions()
        if width is None:
            self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
            self.setMinimumSize(0, 0)
            self.setMaximumSize(16777215, 16777215)
        else:
            self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
            self.setFixedSize(int(round(width)), int(round(height)))

    # --- Sizing helpers ---
    def sizeHint(self) -> QSize:  # type: ignore[override]
        width, height = self.keyboard.dimensions()
        if width is None:
            # Nominal natural key of 24x72 px when the parent decides the size
            count = self.keyboard.natural_key_count()
            return QSize(24 * count, 72)
        return QSize(int(round(width)), int(round(height)))

    def minimumSizeHint(self) -> QSize:  # type: ignore[override]
        width, height = self.keyboard.dimensions()
        if width is None:
            return QSize(self.keyboard.natural_key_count() * 6, 24)
        return QSize(int(round(width)), int(round(height)))

    # --- Model updates ---
    def set_active_notes(self, notes):
        self.keyboard.set_active_notes(notes)
        self.update()

    def reconfigure(self, config):
        self.keyboard.reconfigure(config)
        self._touch_points.clear()
        self.setAttribute(Qt.WA_AcceptTouchEvents, config.use_touch_events)
        self._apply_size()
        self.updateGeometry()
        self.update()

    # --- Geometry ---
    def key_rect(self, view: KeyView) -> QRectF:
        w, h = float(self.width()), float(self.height())
        height = h * ACCIDENTAL_HEIGHT_RATIO if view.accidental else h
        return QRectF(view.geometry.left * w, 0, view.geometry.width * w, height)

    def key_at_pos(self, pos: QPointF) -> Optional[int]:
        w, h = max(1, self.width()), max(1, self.height())
        return self.keyboard.key_at(pos.x() / w, pos.y() / h)

    # --- Painting ---
    def paintEvent(self, _):  # type: ignore[override]
        view = self.keyboard.render()
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing)
        border = QPen(QColor(self.theme.border))
        # Naturals first so accidentals paint over them
        for keys in ([k for k in view.keys if not k.accidental], [k for k in view.keys if k.accidental]):
            for key in keys:
                rect = self.key_rect(key)
                p.setPen(border)
                p.setBrush(QColor(self.theme.fill_for(key)))
                p.drawRoundedRect(rect, 3, 3)
                if "PianoKeys__Key--middleC" in key.class_names:
                    marker = QRectF(rect.left() + rect.width() * 0.35, rect.bottom() - 10, rect.width() * 0.3, 4)
                    p.setPen(Qt.NoPen)
                    p.setBrush(QColor(self.theme.middle_c_marker))
                    p.drawRoundedRect(marker, 2, 2)
                if isinstance(key.label, str) and key.label:
                    p.setPen(QColor(self.theme.label_accidental if key.accidental else self.theme.label_natural))
                    label_rect = QRectF(rect.left(), rect.bottom() - 28, rect.width(), 16)
                    p.drawText(label_rect, Qt.AlignCenter, key.label)
        p.end()

    # --- Mouse ---
    def mousePressEvent(self, event):  # type: ignore[override]
        if event.button() != Qt.LeftButton:
            return super().mousePressEvent(event)
        hit = self.key_at_pos(event.position())
        self.keyboard.pointer_moved_to(hit)
        if hit is not None:
            self.keyboard.dispatch(hit, Gesture.MOUSE_DOWN)
        self.update()

    def mouseReleaseEvent(self, event):  # type: ignore[override]
        if event.button() != Qt.LeftButton:
            return super().mouseReleaseEvent(event)
        hit = self.key_at_pos(event.position())
        self.keyboard.pointer_moved_to(hit)
        if hit is not None:
            self.keyboard.dispatch(hit, Gesture.MOUSE_UP)
        else:
            # Released off the keyboard; leave already stopped any note
            self.keyboard.release_pointer()
        self.update()

    def mouseMoveEvent(self, event):  # type: ignore[override]
        self.keyboard.pointer_moved_to(self.key_at_pos(event.position()))
        self.update()

    def mouseDoubleClickEvent(self, event):  # type: ignore[override]
        if event.button() != Qt.LeftButton:
            return super().mouseDoubleClickEvent(event)
        # Qt swaps the second press for a double click; keep it a press too
        self.mousePressEvent(event)
        hit = self.key_at_pos(event.position())
        if hit is not None:
            self.keyboard.dispatch(hit, Gesture.DOUBLE_CLICK)

    def leaveEvent(self, event):  # type: ignore[override]
        self.keyboard.pointer_moved_to(None)
        self.update()
        super().leaveEvent(event)

    # --- Touch ---
    def event(self, event):  # type: ignore[override]
        etype = event.type()
        if etype in (QEvent.TouchBegin, QEvent.TouchUpdate, QEvent.TouchEnd, QEvent.TouchCancel):
            if not self.keyboard.config.use_touch_events:
                return super().event(event)
            self._handle_touch(event)
            event.accept()
            return True
        return super().event(event)

    def _handle_touch(self, event):
        etype = event.type()
        if etype == QEvent.TouchCancel:
            for point_id, midi_number in list(self._touch_points.items()):
                self.keyboard.dispatch(midi_number, Gesture.TOUCH_CANCEL)
            self._touch_points.clear()
            self.update()
            return
        for point in event.points():
            point_id = point.id()
            if point.state() == QEventPoint.State.Pressed:
                hit = self.key_at_pos(point.position())
                if hit is not None:
                    self._touch_points[point_id] = hit
                    self.keyboard.dispatch(hit, Gesture.TOUCH_START)
            elif point.state() == QEventPoint.State.Released:
                midi_number = self._touch_points.pop(point_id, None)
                if midi_number is not None:
                    self.keyboard.dispatch(midi_number, Gesture.TOUCH_END)
        self.update()

    # --- Computer keyboard ---
    def keyPressEvent(self, event):  # type: ignore[override]
        if event.isAutoRepeat():
            event.accept()
            return
        if event.text() and self.keyboard.shortcut_down(event.text()):
            event.accept()
            self.update()
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):  # type: ignore[override]
        if event.isAutoRepeat():
            event.accept()
            return
        if event.text() and self.keyboard.shortcut_up(event.text()):
            event.accept()
            self.update()
            return
        super().keyReleaseEvent(event)
