from pathlib import Path

from compress_ui.compression_settings import CompressionSettings, ImageFormat
from compress_ui.config import UiConfig, load_ui_config


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_ui_config(tmp_path / "missing.toml")
    assert config == UiConfig()
    assert config.initial_settings() == CompressionSettings(quality=0.8, format=ImageFormat.JPEG)


def test_config_values_are_loaded(tmp_path: Path) -> None:
    path = tmp_path / "compress_ui.toml"
    path.write_text(
        'default_quality = 0.6\ndefault_format = "webp"\nlanguage = "zh-hk"\n'
        'settings_file = "state/last.json"\nlog_level = "debug"\n',
        encoding="utf-8",
    )
    config = load_ui_config(path)
    assert config.default_quality == 0.6
    assert config.default_format is ImageFormat.WEBP
    assert config.language == "zh-hk"
    assert config.settings_file == tmp_path / "state" / "last.json"
    assert config.log_level == "DEBUG"


def test_invalid_values_fall_back(tmp_path: Path) -> None:
    path = tmp_path / "compress_ui.toml"
    path.write_text('default_quality = 7\ndefault_format = "GIF"\nlanguage = "fr"\n', encoding="utf-8")
    config = load_ui_config(path)
    assert config.default_quality == 1.0
    assert config.default_format is ImageFormat.JPEG
    assert config.language is None


def test_unparseable_config_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "compress_ui.toml"
    path.write_text("default_quality = [", encoding="utf-8")
    assert load_ui_config(path) == UiConfig()


def test_nan_default_quality_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "compress_ui.toml"
    path.write_text("default_quality = nan\n", encoding="utf-8")
    assert load_ui_config(path).default_quality == 0.8
