import gc
import os
from collections.abc import Iterator

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication, QPushButton

from compress_ui.header import Header
from compress_ui.translator import LANGUAGES, get_language, set_language


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
def header(qapp: QApplication) -> Header:
    set_language("en")
    widget = Header()
    widget.show()
    qapp.processEvents()
    yield widget
    widget.teardown()
    set_language("en")


def test_two_trigger_clicks_open_exactly_once(qapp: QApplication, header: Header) -> None:
    picker = header.language_picker
    changes: list[bool] = []
    picker.controller.opened_changed.connect(changes.append)

    QTest.mouseClick(picker.trigger_button, Qt.MouseButton.LeftButton)
    assert picker.controller.is_open
    assert picker.options_frame.isVisible()

    QTest.mouseClick(picker.trigger_button, Qt.MouseButton.LeftButton)
    assert not picker.controller.is_open
    assert changes == [True, False]


def test_press_outside_closes_picker(qapp: QApplication, header: Header) -> None:
    picker = header.language_picker
    outside = QPushButton("Outside")
    outside.show()
    qapp.processEvents()

    QTest.mouseClick(picker.trigger_button, Qt.MouseButton.LeftButton)
    assert picker.controller.is_open
    QTest.mouseClick(outside, Qt.MouseButton.LeftButton)
    assert not picker.controller.is_open
    assert not picker.options_frame.isVisible()


def test_selecting_language_updates_store_and_labels(qapp: QApplication, header: Header) -> None:
    picker = header.language_picker
    emitted: list[str] = []
    header.language_changed.connect(emitted.append)

    QTest.mouseClick(picker.trigger_button, Qt.MouseButton.LeftButton)
    qapp.processEvents()
    QTest.mouseClick(picker.option_buttons["zh-hk"], Qt.MouseButton.LeftButton)

    assert get_language() == "zh-hk"
    assert emitted == ["zh-hk"]
    assert not picker.controller.is_open
    assert header.title_label.text() == "圖片壓縮工具"
    assert LANGUAGES["zh-hk"] in picker.trigger_button.text()
    assert picker.option_buttons["zh-hk"].property("active") is True
    assert picker.option_buttons["en"].property("active") is False


def test_teardown_closes_picker(qapp: QApplication, header: Header) -> None:
    picker = header.language_picker
    picker.controller.toggle()
    header.teardown()
    assert not picker.controller.is_listening
    assert not picker.options_frame.isVisible()
