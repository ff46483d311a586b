"""Default compression parameter values and quality domain constants."""

from typing import TypedDict


class BasicDefaults(TypedDict):
    quality: float
    output_format: str


class QualityDomain(TypedDict):
    minimum: float
    maximum: float
    step: float
    ticks_per_unit: int


class TierThresholds(TypedDict):
    high: float
    medium: float


BASIC_DEFAULTS: BasicDefaults = {
    "quality": 0.8,
    "output_format": "JPEG",
}

# ticks_per_unit is 1 / step; the range control works in whole ticks.
QUALITY_DOMAIN: QualityDomain = {
    "minimum": 0.1,
    "maximum": 1.0,
    "step": 0.05,
    "ticks_per_unit": 20,
}

TIER_THRESHOLDS: TierThresholds = {
    "high": 0.8,
    "medium": 0.5,
}
