"""Header bar with the application title, links and the language picker."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from compress_ui.constants import LANGUAGE_OPTION_STYLE, LANGUAGE_TRIGGER_STYLE, LINK_STYLE
from compress_ui.dropdown_controller import DropdownController
from compress_ui.translator import LANGUAGE_FLAGS, LANGUAGES, get_language, tr

DOCUMENTATION_URL = "https://github.com/wangruofeng/img_compress/blob/main/README.md"
REPOSITORY_URL = "https://github.com/wangruofeng/img_compress/"


class LanguagePicker(QWidget):
    """Trigger button with a list of languages underneath it."""

    language_changed = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = DropdownController(self)
        self._build_ui()
        self.trigger_button.clicked.connect(self.controller.toggle)
        self.controller.opened_changed.connect(self.options_frame.setVisible)
        self.controller.language_selected.connect(self._on_language_selected)
        self.update_translations()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.trigger_button = QToolButton()
        self.trigger_button.setStyleSheet(LANGUAGE_TRIGGER_STYLE)
        self.trigger_button.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextOnly)
        layout.addWidget(self.trigger_button, alignment=Qt.AlignmentFlag.AlignRight)

        self.options_frame = QFrame()
        self.options_frame.setFrameShape(QFrame.Shape.StyledPanel)
        self.options_frame.setStyleSheet("QFrame { background-color: white; border-radius: 12px; }")
        options_layout = QVBoxLayout(self.options_frame)
        options_layout.setContentsMargins(0, 4, 0, 4)
        options_layout.setSpacing(0)
        self.option_buttons: dict[str, QPushButton] = {}
        for code, name in LANGUAGES.items():
            btn = QPushButton(f"{LANGUAGE_FLAGS[code]}  {name}")
            btn.setStyleSheet(LANGUAGE_OPTION_STYLE)
            btn.clicked.connect(lambda _checked=False, c=code: self.controller.select(c))
            options_layout.addWidget(btn)
            self.option_buttons[code] = btn
        self.options_frame.setVisible(False)
        layout.addWidget(self.options_frame)

    def teardown(self) -> None:
        self.controller.dispose()
        self.options_frame.setVisible(False)

    def update_translations(self) -> None:
        current = get_language()
        self.trigger_button.setText(f"🌐 {LANGUAGES[current]}")
        self.trigger_button.setToolTip(tr("Language"))
        for code, btn in self.option_buttons.items():
            btn.setProperty("active", code == current)
            btn.style().unpolish(btn)
            btn.style().polish(btn)

    def _on_language_selected(self, code: str) -> None:
        self.update_translations()
        self.language_changed.emit(code)


class Header(QWidget):
    """Application title bar with links and the language picker."""

    language_changed = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()
        self.language_picker.language_changed.connect(self._on_language_changed)
        self.update_translations()

    def _build_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 8)

        icon_label = QLabel("🖼️")
        icon_label.setStyleSheet("font-size: 22px; background-color: #d1fae5; border-radius: 8px; padding: 6px;")
        layout.addWidget(icon_label, alignment=Qt.AlignmentFlag.AlignTop)

        titles = QVBoxLayout()
        titles.setSpacing(0)
        self.title_label = QLabel()
        self.title_label.setStyleSheet("font-size: 20px; font-weight: bold; color: #111827;")
        self.subtitle_label = QLabel()
        self.subtitle_label.setStyleSheet("font-size: 11px; color: #059669; font-weight: 500;")
        titles.addWidget(self.title_label)
        titles.addWidget(self.subtitle_label)
        layout.addLayout(titles)
        layout.addStretch()

        self.docs_link = QLabel()
        self.docs_link.setOpenExternalLinks(True)
        self.repo_link = QLabel()
        self.repo_link.setOpenExternalLinks(True)
        layout.addWidget(self.docs_link, alignment=Qt.AlignmentFlag.AlignTop)
        layout.addWidget(self.repo_link, alignment=Qt.AlignmentFlag.AlignTop)

        self.language_picker = LanguagePicker()
        layout.addWidget(self.language_picker, alignment=Qt.AlignmentFlag.AlignTop)

    def teardown(self) -> None:
        self.language_picker.teardown()

    def update_translations(self) -> None:
        """Update UI text for the selected language."""
        self.title_label.setText(tr("Image Compression Tool"))
        self.subtitle_label.setText(tr("Compress images quickly without leaving your desktop"))
        self.docs_link.setText(f'<a href="{DOCUMENTATION_URL}" style="{LINK_STYLE}">{tr("Documentation")}</a>')
        self.repo_link.setText(f'<a href="{REPOSITORY_URL}" style="{LINK_STYLE}">{tr("GitHub")}</a>')
        self.language_picker.update_translations()

    def _on_language_changed(self, code: str) -> None:
        self.update_translations()
        self.language_changed.emit(code)
