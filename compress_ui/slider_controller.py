"""Drag state tracking for the quality slider."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QCoreApplication, QEvent, QObject, Signal

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragEvent(Enum):
    PRESS = "press"
    RELEASE = "release"


def drag_transition(state: DragState, event: DragEvent, disabled: bool) -> DragState:
    """Return the drag state that follows ``event``.

    A press only starts a drag on an enabled control. A release always ends
    one, including when the control was disabled after the press.
    """
    if state is DragState.IDLE and event is DragEvent.PRESS and not disabled:
        return DragState.DRAGGING
    if state is DragState.DRAGGING and event is DragEvent.RELEASE:
        return DragState.IDLE
    return state


@dataclass(frozen=True, slots=True)
class ThumbStyle:
    diameter: int
    border_width: int
    shadow: bool


def thumb_style(dragging: bool) -> ThumbStyle:
    if dragging:
        return ThumbStyle(diameter=24, border_width=3, shadow=True)
    return ThumbStyle(diameter=20, border_width=2, shadow=False)


_PRESS_EVENTS = {QEvent.Type.MouseButtonPress, QEvent.Type.MouseButtonDblClick, QEvent.Type.TouchBegin}
_RELEASE_EVENTS = {QEvent.Type.MouseButtonRelease, QEvent.Type.TouchEnd, QEvent.Type.TouchCancel}


class _PressWatcher(QObject):
    """Forwards presses on a single widget to the controller."""

    def __init__(self, controller: SliderInteractionController) -> None:
        super().__init__(controller)
        self._controller = controller

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() in _PRESS_EVENTS:
            self._controller.press()
        return False


class SliderInteractionController(QObject):
    """Tracks whether the user is dragging the quality control.

    The release listener is installed on the application rather than on the
    slider, so a drag that leaves the widget before the button goes up still
    ends. It only exists while a drag is in progress.
    """

    dragging_changed = Signal(bool)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._state = DragState.IDLE
        self._disabled = False
        self._listening = False
        self._press_watcher = _PressWatcher(self)

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state is DragState.DRAGGING

    @property
    def is_listening(self) -> bool:
        """``True`` while the application-wide release listener is installed."""
        return self._listening

    def set_disabled(self, disabled: bool) -> None:
        # Deliberately leaves an ongoing drag alone; the release ends it.
        self._disabled = disabled

    def watch(self, widget: QObject) -> None:
        """Start a drag whenever ``widget`` receives a press."""
        widget.installEventFilter(self._press_watcher)

    def press(self) -> None:
        self._apply(DragEvent.PRESS)

    def release(self) -> None:
        self._apply(DragEvent.RELEASE)

    def dispose(self) -> None:
        """Drop the release listener and forget any drag in progress."""
        self._stop_listening()
        self._state = DragState.IDLE

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() in _RELEASE_EVENTS:
            self.release()
        return False

    def _apply(self, event: DragEvent) -> None:
        new_state = drag_transition(self._state, event, self._disabled)
        if new_state is self._state:
            if event is DragEvent.PRESS and self._disabled:
                logger.debug("Ignoring press on disabled quality slider")
            return
        logger.debug("Quality slider %s -> %s", self._state.value, new_state.value)
        self._state = new_state
        if new_state is DragState.DRAGGING:
            self._start_listening()
        else:
            self._stop_listening()
        self.dragging_changed.emit(self.is_dragging)

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
