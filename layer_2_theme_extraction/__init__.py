"""
Layer 2: Theme extraction (keyword taxonomy) and phrase extraction
(concern and action phrases from first-person sentences).
"""
from .theme_config import (
    Theme,
    THEMES,
    THEME_PATTERNS,
    FALLBACK_THEME,
    get_theme_list,
    get_theme_description,
    is_valid_theme,
    get_fallback_theme,
)
from .classifier import ThemeClassifier, classify_themes
from .phrase_extractor import (
    ExtractionPattern,
    PhraseExtractor,
    CONCERN_PATTERNS,
    ACTION_PATTERNS,
    split_sentences,
    extract_concerns,
    extract_actions,
)

__all__ = [
    'Theme',
    'THEMES',
    'THEME_PATTERNS',
    'FALLBACK_THEME',
    'get_theme_list',
    'get_theme_description',
    'is_valid_theme',
    'get_fallback_theme',
    'ThemeClassifier',
    'classify_themes',
    'ExtractionPattern',
    'PhraseExtractor',
    'CONCERN_PATTERNS',
    'ACTION_PATTERNS',
    'split_sentences',
    'extract_concerns',
    'extract_actions',
]
