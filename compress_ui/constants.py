from compress_ui.compression_settings import QualityTier

# (gradient start, gradient end) per tier; the start colour doubles as the thumb border.
TIER_GRADIENTS: dict[QualityTier, tuple[str, str]] = {
    QualityTier.HIGH: ("#10b981", "#34d399"),
    QualityTier.MEDIUM: ("#f59e0b", "#fbbf24"),
    QualityTier.LOW: ("#ef4444", "#f87171"),
}

# (background, text) of the quality badge per tier.
TIER_BADGE_COLORS: dict[QualityTier, tuple[str, str]] = {
    QualityTier.HIGH: ("#dcfce7", "#15803d"),
    QualityTier.MEDIUM: ("#fef9c3", "#a16207"),
    QualityTier.LOW: ("#fee2e2", "#b91c1c"),
}

TRACK_COLOR = "#e5e7eb"
TRACK_HEIGHT = 12


def badge_style(tier: QualityTier) -> str:
    background, text = TIER_BADGE_COLORS[tier]
    return (
        f"background-color: {background}; color: {text}; font-size: 11px; "
        "font-weight: bold; padding: 2px 8px; border-radius: 9px;"
    )


PANEL_STYLE = """
    QWidget#settingsPanel {
        background-color: white;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
    }
"""


FORMAT_BUTTON_STYLE = """
    QPushButton {
        padding: 8px 12px;
        border: 1px solid #e5e7eb;
        border-radius: 8px;
        color: #4b5563;
        background-color: white;
    }
    QPushButton:hover {
        border-color: #d1d5db;
    }
    QPushButton:checked {
        border: 2px solid #10b981;
        background-color: #ecfdf5;
        color: #047857;
        font-weight: bold;
    }
    QPushButton:disabled {
        color: #aaa;
    }
"""


LANGUAGE_TRIGGER_STYLE = """
    QToolButton {
        padding: 6px 12px;
        border: 1px solid transparent;
        border-radius: 8px;
        color: #4b5563;
        font-weight: 500;
    }
    QToolButton:hover {
        background-color: #f3f4f6;
        border-color: #e5e7eb;
    }
"""


LANGUAGE_OPTION_STYLE = """
    QPushButton {
        text-align: left;
        padding: 8px 16px;
        border: none;
        color: #4b5563;
        background-color: white;
    }
    QPushButton:hover {
        background-color: #f9fafb;
    }
    QPushButton[active="true"] {
        background-color: #ecfdf5;
        color: #047857;
        font-weight: bold;
    }
"""


LINK_STYLE = "color: #6b7280; font-size: 13px; font-weight: 500;"

CAPTION_STYLE = "color: #9ca3af; font-size: 11px;"

STATUS_LABEL_STYLE = "color: #666; font-size: 12px; font-style: italic;"
