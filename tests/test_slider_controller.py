import gc
import os
from collections.abc import Callable, Iterator

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QEvent, QObject, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QApplication, QWidget

from compress_ui.slider_controller import (
    DragEvent,
    DragState,
    SliderInteractionController,
    drag_transition,
    thumb_style,
)


ControllerFactory = Callable[[], SliderInteractionController]


@pytest.fixture(scope="module")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture(autouse=True)
def close_widgets(qapp: QApplication) -> Iterator[None]:
    """Dispose controllers and delete every top-level widget a test created."""
    yield
    for widget in QApplication.topLevelWidgets():
        for child in widget.findChildren(QObject):
            if hasattr(child, "dispose"):
                child.dispose()
        widget.close()
        widget.deleteLater()
    QApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)
    gc.collect()


@pytest.fixture
def make_controller(qapp: QApplication) -> Iterator[ControllerFactory]:
    created: list[SliderInteractionController] = []

    def factory() -> SliderInteractionController:
        controller = SliderInteractionController()
        created.append(controller)
        return controller

    yield factory
    for controller in created:
        controller.dispose()
        controller.deleteLater()
    QApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)


def _mouse_event(kind: QEvent.Type) -> QMouseEvent:
    return QMouseEvent(
        kind,
        QPointF(1, 1),
        QPointF(1, 1),
        Qt.MouseButton.LeftButton,
        Qt.MouseButton.LeftButton,
        Qt.KeyboardModifier.NoModifier,
    )


def test_drag_transition_table() -> None:
    assert drag_transition(DragState.IDLE, DragEvent.PRESS, False) is DragState.DRAGGING
    assert drag_transition(DragState.IDLE, DragEvent.PRESS, True) is DragState.IDLE
    assert drag_transition(DragState.IDLE, DragEvent.RELEASE, False) is DragState.IDLE
    assert drag_transition(DragState.DRAGGING, DragEvent.RELEASE, False) is DragState.IDLE
    assert drag_transition(DragState.DRAGGING, DragEvent.RELEASE, True) is DragState.IDLE
    assert drag_transition(DragState.DRAGGING, DragEvent.PRESS, False) is DragState.DRAGGING


def test_thumb_grows_while_dragging() -> None:
    idle, dragging = thumb_style(False), thumb_style(True)
    assert dragging.diameter > idle.diameter
    assert dragging.border_width > idle.border_width
    assert dragging.shadow and not idle.shadow


def test_press_while_disabled_is_ignored(qapp: QApplication, make_controller: ControllerFactory) -> None:
    controller = make_controller()
    changes: list[bool] = []
    controller.dragging_changed.connect(changes.append)
    controller.set_disabled(True)
    controller.press()
    assert controller.state is DragState.IDLE
    assert not controller.is_listening
    assert changes == []


def test_release_anywhere_ends_drag(qapp: QApplication, make_controller: ControllerFactory) -> None:
    controller = make_controller()
    changes: list[bool] = []
    controller.dragging_changed.connect(changes.append)
    controller.press()
    assert controller.is_dragging
    assert controller.is_listening

    elsewhere = QWidget()
    elsewhere.show()
    qapp.processEvents()
    QApplication.sendEvent(elsewhere, _mouse_event(QEvent.Type.MouseButtonRelease))

    assert controller.state is DragState.IDLE
    assert not controller.is_listening
    assert changes == [True, False]


def test_press_on_watched_widget_starts_drag(qapp: QApplication, make_controller: ControllerFactory) -> None:
    controller = make_controller()
    slider = QWidget()
    slider.show()
    controller.watch(slider)
    QApplication.sendEvent(slider, _mouse_event(QEvent.Type.MouseButtonPress))
    assert controller.is_dragging
    QApplication.sendEvent(slider, _mouse_event(QEvent.Type.MouseButtonRelease))
    assert not controller.is_dragging


def test_disabling_mid_drag_lets_drag_finish(qapp: QApplication, make_controller: ControllerFactory) -> None:
    controller = make_controller()
    controller.press()
    controller.set_disabled(True)
    assert controller.is_dragging
    controller.release()
    assert not controller.is_dragging
    controller.press()
    assert not controller.is_dragging


def test_listener_does_not_accumulate(qapp: QApplication, make_controller: ControllerFactory) -> None:
    controller = make_controller()
    changes: list[bool] = []
    controller.dragging_changed.connect(changes.append)
    for _ in range(3):
        controller.press()
        controller.release()
    assert not controller.is_listening
    other = QWidget()
    QApplication.sendEvent(other, _mouse_event(QEvent.Type.MouseButtonRelease))
    assert changes == [True, False] * 3


def test_dispose_removes_listener(qapp: QApplication, make_controller: ControllerFactory) -> None:
    controller = make_controller()
    changes: list[bool] = []
    controller.press()
    controller.dragging_changed.connect(changes.append)
    controller.dispose()
    assert not controller.is_listening
    assert controller.state is DragState.IDLE
    QApplication.sendEvent(QWidget(), _mouse_event(QEvent.Type.MouseButtonRelease))
    assert changes == []


def test_controllers_keep_separate_state(qapp: QApplication, make_controller: ControllerFactory) -> None:
    first = make_controller()
    second = make_controller()
    first.press()
    assert first.is_dragging
    assert not second.is_dragging
    assert not second.is_listening
    first.release()


def test_double_click_press_starts_drag(qapp: QApplication, make_controller: ControllerFactory) -> None:
    controller = make_controller()
    slider = QWidget()
    slider.show()
    controller.watch(slider)
    QApplication.sendEvent(slider, _mouse_event(QEvent.Type.MouseButtonDblClick))
    assert controller.is_dragging
    QApplication.sendEvent(slider, _mouse_event(QEvent.Type.MouseButtonRelease))
    assert not controller.is_dragging
