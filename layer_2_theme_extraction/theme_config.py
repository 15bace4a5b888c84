"""
Theme configuration for thought classification
Defines the closed theme taxonomy, the keyword patterns that detect each
theme, and the fallback theme used when nothing matches
"""
import re
from enum import Enum


class Theme(str, Enum):
    """Closed set of topic labels a thought can be tagged with"""
    WORK = "work"
    RELATIONSHIPS = "relationships"
    FINANCES = "finances"
    FAMILY = "family"
    HEALTH = "health"
    DECISIONS = "decisions"
    FUTURE = "future"
    TIME_MANAGEMENT = "time-management"
    SOCIAL = "social"
    CREATIVE_PROJECTS = "creative-projects"
    PERSONAL_GROWTH = "personal-growth"


# Theme definitions, in match order. Each theme is added once, the first time
# one of its keywords appears (whole words, case-insensitive).
THEMES = {
    Theme.WORK: {
        "description": "job, career, manager, colleagues, deadlines",
        "keywords": ["work", "job", "career", "office", "boss", "manager", "colleague", "deadline", "project"]
    },
    Theme.RELATIONSHIPS: {
        "description": "partner, dating, marriage, romantic connection",
        "keywords": ["relationship", "partner", "spouse", "boyfriend", "girlfriend", "dating", "marriage", "love"]
    },
    Theme.FINANCES: {
        "description": "money, debt, bills, income, saving",
        "keywords": ["money", "financial", "debt", "bills", "salary", "income", "budget", "savings"]
    },
    Theme.FAMILY: {
        "description": "parents, siblings, children, family dynamics",
        "keywords": ["family", "parent", "mother", "father", "sibling", "children", "kids"]
    },
    Theme.HEALTH: {
        "description": "physical and mental health, energy, sleep",
        "keywords": ["health", "sick", "doctor", "medical", "anxiety", "stress", "depression", "tired", "sleep"]
    },
    Theme.DECISIONS: {
        "description": "choices, options, weighing alternatives",
        "keywords": ["decision", "choice", "choose", "option", "should i", "wondering if"]
    },
    Theme.FUTURE: {
        "description": "plans, goals, ambitions",
        "keywords": ["future", "plan", "goal", "dream", "aspiration", "ambition"]
    },
    Theme.TIME_MANAGEMENT: {
        "description": "schedule, busyness, competing priorities",
        "keywords": ["time", "busy", "schedule", "overwhelm", "too much"]
    },
    Theme.SOCIAL: {
        "description": "friends, belonging, loneliness",
        "keywords": ["friend", "friendship", "social", r"lonel\w*", r"isolat\w*"]
    },
    Theme.CREATIVE_PROJECTS: {
        "description": "ideas, side projects, starting something new",
        "keywords": ["creative", "project", "idea", "start", "begin", "launch"]
    },
    Theme.PERSONAL_GROWTH: {
        "description": "general reflection when no specific topic stands out",
        "keywords": []
    },
}

# Theme used when no keyword matches
FALLBACK_THEME = Theme.PERSONAL_GROWTH


def build_theme_pattern(keywords: list[str]) -> re.Pattern:
    """
    Compile a keyword list into one word-boundary alternation

    Args:
        keywords: Keywords or keyword regex fragments

    Returns:
        Compiled case-insensitive pattern
    """
    return re.compile(r'\b(?:' + '|'.join(keywords) + r')\b', re.IGNORECASE)


# Ordered (pattern, theme) table used by the classifier
THEME_PATTERNS = [
    (build_theme_pattern(theme_data["keywords"]), theme)
    for theme, theme_data in THEMES.items()
    if theme_data["keywords"]
]


def get_theme_list() -> list[Theme]:
    """
    Get list of all themes in match order

    Returns:
        List of themes
    """
    return list(THEMES.keys())


def get_theme_description(theme_name: str) -> str:
    """
    Get description for a specific theme

    Args:
        theme_name: Theme or theme value (e.g. "time-management")

    Returns:
        Theme description, or empty string if theme not found
    """
    if not is_valid_theme(theme_name):
        return ""
    return THEMES[Theme(theme_name)]["description"]


def is_valid_theme(theme_name: str) -> bool:
    """
    Check if a theme name is valid

    Args:
        theme_name: Theme name to validate

    Returns:
        True if theme is valid, False otherwise
    """
    try:
        Theme(theme_name)
    except ValueError:
        return False
    return True


def get_fallback_theme() -> Theme:
    """
    Get the fallback theme

    Returns:
        Fallback theme
    """
    return FALLBACK_THEME
