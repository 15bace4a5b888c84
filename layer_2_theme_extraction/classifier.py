"""
Keyword-based theme classifier that tags a thought with one or more themes
"""
import re
from typing import List, Optional, Sequence, Tuple

from layer_2_theme_extraction.theme_config import (
    Theme,
    THEME_PATTERNS,
    get_fallback_theme,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class ThemeClassifier:
    """Match text against an ordered (pattern, theme) table"""

    def __init__(self, patterns: Optional[Sequence[Tuple[re.Pattern, Theme]]] = None,
                 fallback_theme: Optional[Theme] = None):
        """
        Initialize classifier

        Args:
            patterns: Ordered (pattern, theme) pairs (defaults to THEME_PATTERNS)
            fallback_theme: Theme returned when nothing matches
        """
        self.patterns = list(patterns if patterns is not None else THEME_PATTERNS)
        self.fallback_theme = fallback_theme or get_fallback_theme()

    def classify(self, text: str) -> List[Theme]:
        """
        Tag text with every theme whose keywords appear in it

        Args:
            text: Normalized text

        Returns:
            Themes in table order, each at most once; never empty
        """
        themes: List[Theme] = []
        for pattern, theme in self.patterns:
            if theme not in themes and pattern.search(text):
                themes.append(theme)

        if not themes:
            logger.debug(f"No theme keywords matched, using fallback theme {self.fallback_theme.value}")
            return [self.fallback_theme]

        logger.debug(f"Matched themes: {', '.join(theme.value for theme in themes)}")
        return themes


_default_classifier = ThemeClassifier()


def classify_themes(text: str) -> List[Theme]:
    """Classify text with the default theme table"""
    return _default_classifier.classify(text)
