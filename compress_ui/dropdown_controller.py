"""Open/close state of the language dropdown."""

from __future__ import annotations

import logging
from enum import Enum

from PySide6.QtCore import QCoreApplication, QEvent, QObject, Signal
from PySide6.QtWidgets import QWidget

from compress_ui.translator import set_language

logger = logging.getLogger(__name__)


class DropdownState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class DropdownEvent(Enum):
    TOGGLE = "toggle"
    SELECT = "select"
    OUTSIDE_PRESS = "outside_press"


def dropdown_transition(state: DropdownState, event: DropdownEvent) -> DropdownState:
    if event is DropdownEvent.TOGGLE:
        return DropdownState.CLOSED if state is DropdownState.OPEN else DropdownState.OPEN
    return DropdownState.CLOSED


def is_inside(root: QWidget, target: QObject) -> bool:
    """Return ``True`` if ``target`` is ``root`` or one of its descendants."""
    if not isinstance(target, QWidget):
        return False
    return target is root or root.isAncestorOf(target)


_PRESS_EVENTS = {QEvent.Type.MouseButtonPress, QEvent.Type.TouchBegin}


class DropdownController(QObject):
    """Single dropdown that closes on selection or on a press outside ``root``.

    The outside-press listener is an application-wide event filter that only
    exists while the dropdown is open. Presses delivered to ``root`` or its
    children are left to the trigger and option buttons, so a click on the
    trigger toggles exactly once.
    """

    opened_changed = Signal(bool)
    language_selected = Signal(str)

    def __init__(self, root: QWidget) -> None:
        super().__init__(root)
        self._root = root
        self._state = DropdownState.CLOSED
        self._listening = False

    @property
    def state(self) -> DropdownState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is DropdownState.OPEN

    @property
    def is_listening(self) -> bool:
        return self._listening

    def toggle(self) -> None:
        self._apply(DropdownEvent.TOGGLE)

    def select(self, code: str) -> None:
        """Commit ``code`` as the current language and close."""
        set_language(code)
        self._apply(DropdownEvent.SELECT)
        self.language_selected.emit(code)

    def close(self) -> None:
        self._apply(DropdownEvent.OUTSIDE_PRESS)

    def dispose(self) -> None:
        self._stop_listening()
        self._state = DropdownState.CLOSED

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() in _PRESS_EVENTS and isinstance(obj, QWidget) and not is_inside(self._root, obj):
            self._apply(DropdownEvent.OUTSIDE_PRESS)
        return False

    def _apply(self, event: DropdownEvent) -> None:
        new_state = dropdown_transition(self._state, event)
        if new_state is self._state:
            return
        logger.debug("Language dropdown %s -> %s (%s)", self._state.value, new_state.value, event.value)
        self._state = new_state
        if self.is_open:
            self._start_listening()
        else:
            self._stop_listening()
        self.opened_changed.emit(self.is_open)

    def _start_listening(self) -> None:
        app = QCoreApplication.instance()
        if app is not None and not self._listening:
            app.installEventFilter(self)
            self._listening = True

    def _stop_listening(self) -> None:
        app = QCoreApplication.instance()
        if app is not None and self._listening:
            app.removeEventFilter(self)
        self._listening = False
