"""Settings panel with the quality slider and the output format buttons."""

from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QLinearGradient, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from compress_ui.compression_settings import (
    QUALITY_MAX,
    QUALITY_MIN,
    CompressionSettings,
    ImageFormat,
    format_description_key,
    format_label,
    percent_position,
    quality_badge_text,
    quality_to_tick,
    set_format,
    set_quality,
    tick_to_quality,
    tier_of,
)
from compress_ui.constants import (
    CAPTION_STYLE,
    FORMAT_BUTTON_STYLE,
    PANEL_STYLE,
    TIER_GRADIENTS,
    TRACK_COLOR,
    TRACK_HEIGHT,
    badge_style,
)
from compress_ui.slider_controller import SliderInteractionController, thumb_style
from compress_ui.translator import tr

logger = logging.getLogger(__name__)

FORMAT_ORDER = [ImageFormat.JPEG, ImageFormat.PNG, ImageFormat.WEBP]


class QualitySlider(QSlider):
    """Range control painted as a tier-coloured progress bar with a round thumb."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(Qt.Orientation.Horizontal, parent)
        self.setRange(quality_to_tick(QUALITY_MIN), quality_to_tick(QUALITY_MAX))
        self.setSingleStep(1)
        self.setPageStep(2)
        self.setFixedHeight(32)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._dragging = False

    def quality(self) -> float:
        return tick_to_quality(self.value())

    def is_dragging(self) -> bool:
        return self._dragging

    def set_dragging(self, dragging: bool) -> None:
        self._dragging = dragging
        self.update()

    def _track_rect(self) -> QRectF:
        margin = thumb_style(True).diameter / 2 + 2
        return QRectF(
            margin,
            (self.height() - TRACK_HEIGHT) / 2,
            max(self.width() - 2 * margin, 1.0),
            TRACK_HEIGHT,
        )

    def _tick_at(self, x: float) -> int:
        track = self._track_rect()
        ratio = min(max((x - track.left()) / track.width(), 0.0), 1.0)
        return round(self.minimum() + ratio * (self.maximum() - self.minimum()))

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self.setSliderDown(True)
        self.setValue(self._tick_at(event.position().x()))
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self.isSliderDown():
            self.setValue(self._tick_at(event.position().x()))
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if self.isSliderDown():
            self.setSliderDown(False)
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        quality = self.quality()
        start, end = TIER_GRADIENTS[tier_of(quality)]
        style = thumb_style(self._dragging)
        track = self._track_rect()
        radius = track.height() / 2
        fill_width = track.width() * percent_position(quality) / 100

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        if not self.isEnabled():
            painter.setOpacity(0.5)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(TRACK_COLOR))
        painter.drawRoundedRect(track, radius, radius)

        if fill_width > 0:
            fill = QRectF(track.left(), track.top(), fill_width, track.height())
            gradient = QLinearGradient(fill.topLeft(), fill.topRight())
            gradient.setColorAt(0.0, QColor(start))
            gradient.setColorAt(1.0, QColor(end))
            painter.setBrush(gradient)
            painter.drawRoundedRect(fill, radius, radius)

        center = QPointF(track.left() + fill_width, track.center().y())
        thumb_radius = style.diameter / 2
        if style.shadow:
            painter.setBrush(QColor(0, 0, 0, 50))
            painter.drawEllipse(center, thumb_radius + 2, thumb_radius + 2)
        painter.setPen(QPen(QColor(start), style.border_width))
        painter.setBrush(QColor("white"))
        painter.drawEllipse(center, thumb_radius - style.border_width / 2, thumb_radius - style.border_width / 2)
        painter.end()


class SettingsPanel(QWidget):
    """Quality slider and output format selector.

    The panel is fully controlled: it displays the settings its owner last
    passed to :meth:`set_settings` and reports user edits through
    ``settings_changed``. An edit the owner does not apply is reverted.
    """

    settings_changed = Signal(object)

    def __init__(
        self,
        settings: CompressionSettings | None = None,
        *,
        disabled: bool = False,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("settingsPanel")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(PANEL_STYLE)
        self._settings = settings or CompressionSettings()
        self._disabled = False
        self.drag_controller = SliderInteractionController(self)
        self._build_ui()
        self.setup_connections()
        self.set_settings(self._settings)
        self.set_disabled(disabled)
        self.update_translations()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        self.title_label = QLabel()
        self.title_label.setStyleSheet("font-weight: 600; color: #111827;")
        layout.addWidget(self.title_label)

        grid = QGridLayout()
        grid.setHorizontalSpacing(32)
        layout.addLayout(grid)

        # Quality column
        quality_col = QVBoxLayout()
        quality_header = QHBoxLayout()
        self.quality_label = QLabel()
        quality_header.addWidget(self.quality_label)
        quality_header.addStretch()
        self.quality_badge = QLabel()
        quality_header.addWidget(self.quality_badge)
        quality_col.addLayout(quality_header)

        self.quality_slider = QualitySlider()
        quality_col.addWidget(self.quality_slider)

        captions = QHBoxLayout()
        self.low_size_label = QLabel()
        self.low_size_label.setStyleSheet(CAPTION_STYLE)
        self.best_quality_label = QLabel()
        self.best_quality_label.setStyleSheet(CAPTION_STYLE)
        captions.addWidget(self.low_size_label)
        captions.addStretch()
        captions.addWidget(self.best_quality_label)
        quality_col.addLayout(captions)
        quality_col.addStretch()
        grid.addLayout(quality_col, 0, 0)

        # Format column
        format_col = QVBoxLayout()
        self.format_label = QLabel()
        format_col.addWidget(self.format_label)
        buttons = QHBoxLayout()
        self.format_group = QButtonGroup(self)
        self.format_group.setExclusive(True)
        self.format_buttons: dict[ImageFormat, QPushButton] = {}
        for index, fmt in enumerate(FORMAT_ORDER):
            btn = QPushButton(format_label(fmt))
            btn.setCheckable(True)
            btn.setStyleSheet(FORMAT_BUTTON_STYLE)
            self.format_group.addButton(btn, index)
            self.format_buttons[fmt] = btn
            buttons.addWidget(btn)
        format_col.addLayout(buttons)
        self.format_description = QLabel()
        self.format_description.setWordWrap(True)
        self.format_description.setStyleSheet("color: #6b7280; font-size: 11px;")
        format_col.addWidget(self.format_description)
        format_col.addStretch()
        grid.addLayout(format_col, 0, 1)

    def setup_connections(self) -> None:
        self.quality_slider.valueChanged.connect(self._on_slider_value_changed)
        self.format_group.idClicked.connect(self._on_format_clicked)
        self.drag_controller.watch(self.quality_slider)
        self.drag_controller.dragging_changed.connect(self.quality_slider.set_dragging)

    @property
    def settings(self) -> CompressionSettings:
        return self._settings

    @property
    def disabled(self) -> bool:
        return self._disabled

    def set_settings(self, settings: CompressionSettings) -> None:
        """Display ``settings``; does not emit ``settings_changed``."""
        self._settings = settings
        self.quality_slider.blockSignals(True)
        self.quality_slider.setValue(quality_to_tick(settings.quality))
        self.quality_slider.blockSignals(False)
        self.format_buttons[settings.format].setChecked(True)
        self._refresh_quality_view()
        self._refresh_format_view()

    def set_disabled(self, disabled: bool) -> None:
        self._disabled = disabled
        self.drag_controller.set_disabled(disabled)
        self.quality_slider.setEnabled(not disabled)
        for btn in self.format_buttons.values():
            btn.setEnabled(not disabled)

    def teardown(self) -> None:
        self.drag_controller.dispose()
        self.quality_slider.set_dragging(False)

    def update_translations(self) -> None:
        """Update UI text for the selected language."""
        self.title_label.setText("⚙️ " + tr("Compression Settings"))
        self.quality_label.setText(tr("Quality"))
        self.low_size_label.setText(tr("Smaller size"))
        self.best_quality_label.setText(tr("Best quality"))
        self.format_label.setText(tr("Output Format"))
        self._refresh_quality_view()
        self._refresh_format_view()

    def _refresh_quality_view(self) -> None:
        quality = self._settings.quality
        self.quality_badge.setText(quality_badge_text(quality))
        self.quality_badge.setStyleSheet(badge_style(tier_of(quality)))
        self.quality_slider.update()

    def _refresh_format_view(self) -> None:
        self.format_description.setText(tr(format_description_key(self._settings.format)))

    def _on_slider_value_changed(self, tick: int) -> None:
        quality = tick_to_quality(tick)
        if quality == self._settings.quality:
            return
        self.settings_changed.emit(set_quality(self._settings, quality))
        self.set_settings(self._settings)

    def _on_format_clicked(self, index: int) -> None:
        fmt = FORMAT_ORDER[index]
        if fmt is self._settings.format:
            return
        logger.debug("Output format selected: %s", fmt.name)
        self.settings_changed.emit(set_format(self._settings, fmt))
        self.set_settings(self._settings)
