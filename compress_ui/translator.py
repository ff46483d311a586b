"""Simple runtime translation support."""

import locale
import logging

logger = logging.getLogger(__name__)

LANGUAGES: dict[str, str] = {
    "en": "English",
    "zh": "简体中文",
    "zh-hk": "繁體中文",
}

LANGUAGE_FLAGS: dict[str, str] = {
    "en": "🇺🇸",
    "zh": "🇨🇳",
    "zh-hk": "🇭🇰",
}

_translations: dict[str, dict[str, str]] = {
    "zh": {
        "Image Compression Tool": "图片压缩工具",
        "Compress images quickly without leaving your desktop": "在桌面上快速压缩图片",
        "Documentation": "使用文档",
        "GitHub": "GitHub",
        "Language": "语言",
        "Compression Settings": "压缩设置",
        "Quality": "压缩质量",
        "High": "高",
        "Medium": "中",
        "Low": "低",
        "Smaller size": "体积更小",
        "Best quality": "画质最佳",
        "Output Format": "输出格式",
        "JPEG: best for photos, smallest files.": "JPEG：适合照片，文件最小。",
        "PNG: lossless, keeps transparency; quality is ignored.": "PNG：无损压缩，保留透明度；质量设置无效。",
        "WebP: modern format with great compression and transparency.": "WebP：现代格式，压缩率高且支持透明。",
    },
    "zh-hk": {
        "Image Compression Tool": "圖片壓縮工具",
        "Compress images quickly without leaving your desktop": "在桌面上快速壓縮圖片",
        "Documentation": "使用文件",
        "GitHub": "GitHub",
        "Language": "語言",
        "Compression Settings": "壓縮設定",
        "Quality": "壓縮質素",
        "High": "高",
        "Medium": "中",
        "Low": "低",
        "Smaller size": "體積更細",
        "Best quality": "畫質最佳",
        "Output Format": "輸出格式",
        "JPEG: best for photos, smallest files.": "JPEG：適合相片，檔案最細。",
        "PNG: lossless, keeps transparency; quality is ignored.": "PNG：無損壓縮，保留透明度；質素設定無效。",
        "WebP: modern format with great compression and transparency.": "WebP：現代格式，壓縮率高並支援透明。",
    },
}

_TRADITIONAL_REGIONS = {"HK", "TW", "MO"}


def language_from_locale(name: str | None) -> str:
    """Map a POSIX locale name such as ``zh_HK.UTF-8`` to a language code."""
    if not name:
        return "en"
    base = name.split(".")[0].replace("-", "_")
    lang, *rest = base.split("_")
    if lang.lower() != "zh":
        return lang.lower() if lang.lower() in LANGUAGES else "en"
    if any(part.upper() in _TRADITIONAL_REGIONS or part.lower() == "hant" for part in rest):
        return "zh-hk"
    return "zh"


def _detect_system_language() -> str:
    """Return a language code based on system locale."""
    lang, _ = locale.getlocale()
    return language_from_locale(lang)


_current_language = _detect_system_language()


def set_language(code: str) -> None:
    """Set the active language code."""
    global _current_language  # noqa: PLW0603
    if code in LANGUAGES:
        if code != _current_language:
            logger.info("Language changed: %s -> %s", _current_language, code)
        _current_language = code
    else:
        logger.warning("Ignoring unknown language code %r", code)


def get_language() -> str:
    """Return the current language code."""
    return _current_language


def tr(text: str) -> str:
    """Translate ``text`` into the currently selected language."""
    return _translations.get(_current_language, {}).get(text, text)
