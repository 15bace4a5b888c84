"""
Whitespace normalization for raw thought text
"""
import re

# Horizontal whitespace = every whitespace char except the newline itself
_RE_LINE_ENDINGS = re.compile(r'\r\n?')
_RE_HORIZONTAL_RUN = re.compile(r'[^\S\n]+')
_RE_SPACE_AROUND_NEWLINE = re.compile(r' ?\n ?')
_RE_NEWLINE_RUN = re.compile(r'\n{3,}')


def normalize(text: str) -> str:
    """
    Collapse whitespace into a canonical form

    Newlines are handled separately from other whitespace so that paragraph
    breaks survive: spaces and tabs collapse to a single space, a blank-line
    run of any length becomes exactly one blank line, and the ends are
    stripped. Never fails; normalize(normalize(x)) == normalize(x).

    Args:
        text: Raw input text

    Returns:
        Normalized text
    """
    if not text:
        return ""

    normalized = _RE_LINE_ENDINGS.sub('\n', text)
    normalized = _RE_HORIZONTAL_RUN.sub(' ', normalized)
    normalized = _RE_SPACE_AROUND_NEWLINE.sub('\n', normalized)
    normalized = _RE_NEWLINE_RUN.sub('\n\n', normalized)
    return normalized.strip()
