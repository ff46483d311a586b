"""Compression settings value object and its pure derivations."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any

from compress_ui.parameters_defaults import BASIC_DEFAULTS, QUALITY_DOMAIN, TIER_THRESHOLDS
from compress_ui.translator import tr

logger = logging.getLogger(__name__)

QUALITY_MIN = QUALITY_DOMAIN["minimum"]
QUALITY_MAX = QUALITY_DOMAIN["maximum"]
TICKS_PER_UNIT = QUALITY_DOMAIN["ticks_per_unit"]


class ImageFormat(Enum):
    """Output formats offered by the settings panel."""

    JPEG = "image/jpeg"
    PNG = "image/png"
    WEBP = "image/webp"

    @classmethod
    def parse(cls, value: str) -> ImageFormat:
        """Accept either a member name (``"PNG"``) or a MIME type."""
        try:
            return cls[value.upper()]
        except KeyError:
            return cls(value.lower())


class QualityTier(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


_TIER_LABELS = {
    QualityTier.HIGH: "High",
    QualityTier.MEDIUM: "Medium",
    QualityTier.LOW: "Low",
}

_FORMAT_LABELS = {
    ImageFormat.JPEG: "JPG",
    ImageFormat.PNG: "PNG",
    ImageFormat.WEBP: "WebP",
}

_FORMAT_DESCRIPTIONS = {
    ImageFormat.JPEG: "JPEG: best for photos, smallest files.",
    ImageFormat.PNG: "PNG: lossless, keeps transparency; quality is ignored.",
    ImageFormat.WEBP: "WebP: modern format with great compression and transparency.",
}


def clamp_quality(value: float) -> float:
    value = float(value)
    if math.isnan(value):
        return BASIC_DEFAULTS["quality"]
    return min(max(value, QUALITY_MIN), QUALITY_MAX)


@dataclass(frozen=True, slots=True)
class CompressionSettings:
    """Quality and output format chosen by the user.

    Instances are never mutated; every update returns a new value so owners
    can compare old and new settings directly.
    """

    quality: float = BASIC_DEFAULTS["quality"]
    format: ImageFormat = field(default=ImageFormat[BASIC_DEFAULTS["output_format"]])

    def __post_init__(self) -> None:
        if not QUALITY_MIN <= self.quality <= QUALITY_MAX:
            object.__setattr__(self, "quality", clamp_quality(self.quality))

    def to_dict(self) -> dict[str, Any]:
        return {"quality": self.quality, "format": self.format.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompressionSettings:
        defaults = cls()
        try:
            quality = clamp_quality(data.get("quality", defaults.quality))
        except (TypeError, ValueError):
            quality = defaults.quality
        try:
            fmt = ImageFormat.parse(str(data.get("format", defaults.format.name)))
        except ValueError:
            logger.warning("Unknown output format %r, using %s", data.get("format"), defaults.format.name)
            fmt = defaults.format
        return cls(quality=quality, format=fmt)


def set_quality(settings: CompressionSettings, value: float) -> CompressionSettings:
    """Return ``settings`` with quality ``value`` constrained to the slider domain."""
    quality = clamp_quality(value)
    if quality != value:
        logger.debug("Clamped quality %s to %s", value, quality)
    return replace(settings, quality=quality)


def set_format(settings: CompressionSettings, fmt: ImageFormat) -> CompressionSettings:
    """Return ``settings`` with output format ``fmt``."""
    return replace(settings, format=fmt)


def tier_of(quality: float) -> QualityTier:
    """Bucket ``quality`` into a tier; threshold values belong to the higher tier."""
    if quality >= TIER_THRESHOLDS["high"]:
        return QualityTier.HIGH
    if quality >= TIER_THRESHOLDS["medium"]:
        return QualityTier.MEDIUM
    return QualityTier.LOW


def label_for(tier: QualityTier) -> str:
    """Return the translation key of the label shown for ``tier``."""
    return _TIER_LABELS[tier]


def percent_position(quality: float) -> float:
    """Map ``quality`` from the slider domain onto 0..100 percent of its width."""
    return (quality - QUALITY_MIN) / (QUALITY_MAX - QUALITY_MIN) * 100


def quality_to_tick(quality: float) -> int:
    return round(clamp_quality(quality) * TICKS_PER_UNIT)


def tick_to_quality(tick: int) -> float:
    # Dividing keeps tick 9 equal to the literal 0.45, unlike 9 * 0.05.
    return clamp_quality(tick / TICKS_PER_UNIT)


def format_label(fmt: ImageFormat) -> str:
    return _FORMAT_LABELS[fmt]


def format_description_key(fmt: ImageFormat) -> str:
    return _FORMAT_DESCRIPTIONS[fmt]


def quality_badge_text(quality: float) -> str:
    """Return the badge text, e.g. ``"80% (High)"``, in the current language."""
    return f"{round(quality * 100)}% ({tr(label_for(tier_of(quality)))})"


def save_settings(path: Path, settings: CompressionSettings) -> None:
    """Save ``settings`` to a JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(settings.to_dict(), f, indent=2)


def load_settings(path: Path) -> CompressionSettings | None:
    """Load settings previously written by :func:`save_settings`."""
    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring malformed settings file %s", path)
        return None
    return CompressionSettings.from_dict(data)
