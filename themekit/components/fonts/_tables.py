"""
Fallback font tables for non-latin locales.
"""

from __future__ import annotations

from themekit.core.entities import SurfaceType

_ARABIC = ["Tahoma", "Arial", "sans-serif"]
_CYRILLIC = ["'Helvetica Neue'", "Helvetica", "'Segoe UI'", "Arial", "sans-serif"]
_DEVANAGARI = ["Arial", "sans-serif"]

FONT_FAMILIES: dict[str, list[str]] = {
    # Arabic
    "ar": _ARABIC,
    "ary": _ARABIC,
    "azb": _ARABIC,
    "ckb": _ARABIC,
    "fa-IR": _ARABIC,
    "haz": _ARABIC,
    "ps": _ARABIC,
    # Chinese Simplified (China) - Noto Sans SC
    "zh-CN": [
        "'PingFang SC'",
        "'Helvetica Neue'",
        "'Microsoft YaHei New'",
        "'STHeiti Light'",
        "sans-serif",
    ],
    # Chinese Traditional (Taiwan) - Noto Sans TC
    "zh-TW": [
        "'PingFang TC'",
        "'Helvetica Neue'",
        "'Microsoft YaHei New'",
        "'STHeiti Light'",
        "sans-serif",
    ],
    # Chinese (Hong Kong) - Noto Sans HK
    "zh-HK": [
        "'PingFang HK'",
        "'Helvetica Neue'",
        "'Microsoft YaHei New'",
        "'STHeiti Light'",
        "sans-serif",
    ],
    # Cyrillic
    "bel": _CYRILLIC,
    "bg-BG": _CYRILLIC,
    "kk": _CYRILLIC,
    "mk-MK": _CYRILLIC,
    "mn": _CYRILLIC,
    "ru-RU": _CYRILLIC,
    "sah": _CYRILLIC,
    "sr-RS": _CYRILLIC,
    "tt-RU": _CYRILLIC,
    "uk": _CYRILLIC,
    # Devanagari
    "bn-BD": _DEVANAGARI,
    "hi-IN": _DEVANAGARI,
    "mr": _DEVANAGARI,
    "ne-NP": _DEVANAGARI,
    # Greek
    "el": ["'Helvetica Neue', Helvetica, Arial, sans-serif"],
    # Gujarati
    "gu": ["Arial", "sans-serif"],
    # Hebrew
    "he-IL": ["'Arial Hebrew'", "Arial", "sans-serif"],
    # Japanese
    "ja": ["sans-serif"],
    # Korean
    "ko-KR": [
        "'Apple SD Gothic Neo'",
        "'Malgun Gothic'",
        "'Nanum Gothic'",
        "Dotum",
        "sans-serif",
    ],
    # Thai
    "th": ["'Sukhumvit Set'", "'Helvetica Neue'", "Helvetica", "Arial", "sans-serif"],
    # Vietnamese
    "vi": ["'Libre Franklin'", "sans-serif"],
}

FONT_ELEMENTS: dict[SurfaceType, list[str]] = {
    "front-end": [
        "body",
        "input",
        "textarea",
        "button",
        ".button",
        ".faux-button",
        ".wp-block-button__link",
        ".wp-block-file__button",
        ".has-drop-cap:not(:focus)::first-letter",
        ".has-drop-cap:not(:focus)::first-letter",
        ".entry-content .wp-block-archives",
        ".entry-content .wp-block-categories",
        ".entry-content .wp-block-cover-image",
        ".entry-content .wp-block-latest-comments",
        ".entry-content .wp-block-latest-posts",
        ".entry-content .wp-block-pullquote",
        ".entry-content .wp-block-quote.is-large",
        ".entry-content .wp-block-quote.is-style-large",
        ".entry-content .wp-block-archives *",
        ".entry-content .wp-block-categories *",
        ".entry-content .wp-block-latest-posts *",
        ".entry-content .wp-block-latest-comments *",
        ".entry-content p",
        ".entry-content ol",
        ".entry-content ul",
        ".entry-content dl",
        ".entry-content dt",
        ".entry-content cite",
        ".entry-content figcaption",
        ".entry-content .wp-caption-text",
        ".comment-content p",
        ".comment-content ol",
        ".comment-content ul",
        ".comment-content dl",
        ".comment-content dt",
        ".comment-content cite",
        ".comment-content figcaption",
        ".comment-content .wp-caption-text",
        ".widget_text p",
        ".widget_text ol",
        ".widget_text ul",
        ".widget_text dl",
        ".widget_text dt",
        ".widget-content .rssSummary",
        ".widget-content cite",
        ".widget-content figcaption",
        ".widget-content .wp-caption-text",
    ],
    "block-editor": [
        ".editor-styles-wrapper > *",
        ".editor-styles-wrapper p",
        ".editor-styles-wrapper ol",
        ".editor-styles-wrapper ul",
        ".editor-styles-wrapper dl",
        ".editor-styles-wrapper dt",
        ".editor-post-title__block .editor-post-title__input",
        ".editor-styles-wrapper .wp-block h1",
        ".editor-styles-wrapper .wp-block h2",
        ".editor-styles-wrapper .wp-block h3",
        ".editor-styles-wrapper .wp-block h4",
        ".editor-styles-wrapper .wp-block h5",
        ".editor-styles-wrapper .wp-block h6",
        ".editor-styles-wrapper .has-drop-cap:not(:focus)::first-letter",
        ".editor-styles-wrapper cite",
        ".editor-styles-wrapper figcaption",
        ".editor-styles-wrapper .wp-caption-text",
    ],
    "classic-editor": [
        "body#tinymce.wp-editor",
        "body#tinymce.wp-editor p",
        "body#tinymce.wp-editor ol",
        "body#tinymce.wp-editor ul",
        "body#tinymce.wp-editor dl",
        "body#tinymce.wp-editor dt",
        "body#tinymce.wp-editor figcaption",
        "body#tinymce.wp-editor .wp-caption-text",
        "body#tinymce.wp-editor .wp-caption-dd",
        "body#tinymce.wp-editor cite",
        "body#tinymce.wp-editor table",
    ],
}
