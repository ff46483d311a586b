#!/usr/bin/env python3
"""
Image Compression Settings
Main window hosting the header and the compression settings panel.
"""

import logging
import sys
from pathlib import Path

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QVBoxLayout, QWidget

from compress_ui.compression_settings import CompressionSettings, load_settings, save_settings
from compress_ui.config import UiConfig, load_ui_config
from compress_ui.constants import STATUS_LABEL_STYLE
from compress_ui.header import Header
from compress_ui.settings_panel import SettingsPanel
from compress_ui.translator import set_language, tr

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Owns the current compression settings and wires them into the panel."""

    def __init__(self, config: UiConfig | None = None) -> None:
        super().__init__()
        self.config = config or UiConfig()
        if self.config.language:
            set_language(self.config.language)
        self.compression_settings = self._initial_settings()

        self.setup_ui()
        self.setup_connections()
        self.update_translations()

        self.setGeometry(100, 100, 900, 420)
        self.setStyleSheet("""
            QMainWindow {
                background-color: #f0fdf4;
            }
        """)

    def _initial_settings(self) -> CompressionSettings:
        if self.config.settings_file is not None:
            saved = load_settings(self.config.settings_file)
            if saved is not None:
                logger.info("Restored compression settings from %s", self.config.settings_file)
                return saved
        return self.config.initial_settings()

    def setup_ui(self) -> None:
        """Set up the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 20)
        main_layout.setSpacing(20)

        self.header = Header()
        main_layout.addWidget(self.header)

        body = QVBoxLayout()
        body.setContentsMargins(20, 0, 20, 0)
        self.settings_panel = SettingsPanel(self.compression_settings)
        body.addWidget(self.settings_panel)
        self.status_label = QLabel()
        self.status_label.setStyleSheet(STATUS_LABEL_STYLE)
        body.addWidget(self.status_label)
        body.addStretch()
        main_layout.addLayout(body)

    def setup_connections(self) -> None:
        """Set up signal connections."""
        self.settings_panel.settings_changed.connect(self.on_settings_changed)
        self.header.language_changed.connect(self.change_language)

    def on_settings_changed(self, settings: CompressionSettings) -> None:
        """Accept a settings update reported by the panel."""
        self.compression_settings = settings
        self.settings_panel.set_settings(settings)
        self.status_label.setText(f"{settings.format.name} · {settings.quality:.2f}")
        logger.info("Compression settings changed: quality=%.2f format=%s", settings.quality, settings.format.name)
        if self.config.settings_file is not None:
            try:
                save_settings(self.config.settings_file, settings)
            except OSError as e:
                logger.error("Failed to save settings to %s: %s", self.config.settings_file, e)

    def set_busy(self, busy: bool) -> None:
        """Lock the settings while compression is running."""
        self.settings_panel.set_disabled(busy)

    def change_language(self, code: str) -> None:
        """Handle language selection changes."""
        logger.info("Switched UI language to %s", code)
        self.update_translations()
        self.settings_panel.update_translations()

    def update_translations(self) -> None:
        """Update UI text for the selected language."""
        self.setWindowTitle(tr("Image Compression Tool"))

    def closeEvent(self, event: QCloseEvent) -> None:
        self.header.teardown()
        self.settings_panel.teardown()
        super().closeEvent(event)


def main(config_path: Path | None = None) -> None:
    """Main application entry point."""
    config = load_ui_config(config_path)
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = MainWindow(config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
