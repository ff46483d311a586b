"""Configuration loader for the compression settings UI."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from compress_ui.compression_settings import CompressionSettings, ImageFormat, clamp_quality
from compress_ui.parameters_defaults import BASIC_DEFAULTS
from compress_ui.translator import LANGUAGES

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "compress_ui.toml"


@dataclass(slots=True)
class UiConfig:
    """UI configuration.

    ``language`` overrides the language detected from the system locale.
    ``settings_file`` is where the last used compression settings are kept;
    ``None`` disables persistence.
    """

    default_quality: float = BASIC_DEFAULTS["quality"]
    default_format: ImageFormat = field(default=ImageFormat[BASIC_DEFAULTS["output_format"]])
    language: str | None = None
    settings_file: Path | None = None
    log_level: str = "INFO"

    def initial_settings(self) -> CompressionSettings:
        return CompressionSettings(quality=self.default_quality, format=self.default_format)


def load_ui_config(path: Path | None = None) -> UiConfig:
    """Load UI configuration from ``compress_ui.toml``."""

    config_path = path or Path(__file__).resolve().parent.parent / CONFIG_FILE_NAME
    if not config_path.exists():
        return UiConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s, using defaults: %s", config_path, e)
        return UiConfig()

    config = UiConfig()
    try:
        config.default_quality = clamp_quality(data.get("default_quality", config.default_quality))
    except (TypeError, ValueError):
        logger.warning("Invalid default_quality %r", data.get("default_quality"))
    if "default_format" in data:
        try:
            config.default_format = ImageFormat.parse(str(data["default_format"]))
        except ValueError:
            logger.warning("Invalid default_format %r", data["default_format"])
    language = data.get("language")
    if isinstance(language, str) and language in LANGUAGES:
        config.language = language
    elif language is not None:
        logger.warning("Unsupported language %r", language)
    settings_file = data.get("settings_file")
    if settings_file:
        settings_path = Path(settings_file).expanduser()
        if not settings_path.is_absolute():
            settings_path = config_path.parent / settings_path
        config.settings_file = settings_path
    config.log_level = str(data.get("log_level", config.log_level)).upper()

    logger.info("Loaded UI configuration from %s", config_path)
    return config
