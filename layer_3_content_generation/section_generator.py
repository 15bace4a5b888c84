"""
Rule-based section generator

Turns themes, extracted concern/action phrases and a density-derived item
count into the four output sections. Extracted content always comes first;
the per-theme tables in section_tables fill whatever is left.
"""
import re
from typing import Callable, Iterable, List, Optional, Sequence

from models.cognitive import GeneratedSections, PipelineContext
from layer_2_theme_extraction.theme_config import Theme
from layer_2_theme_extraction.phrase_extractor import split_sentences
from layer_3_content_generation.section_tables import (
    THEME_ISSUES,
    THEME_CONTROLLABLES,
    THEME_LET_GO,
    THEME_STEPS,
    PhraseTable,
    phrases_for,
)
from utils.logger import get_logger

logger = get_logger(__name__)

MAX_CLEAN_PHRASE_LENGTH = 70
MAX_KEY_PHRASE_LENGTH = 60
MIN_KEY_PHRASE_LENGTH = 10
MIN_ISSUE_SENTENCE_LENGTH = 10

# Prefix lengths used for near-duplicate checks
ISSUE_PREFIX_LENGTH = 20
STEP_PREFIX_LENGTH = 30

# Excerpt lengths embedded in the templated next steps
ISSUE_EXCERPT_LENGTH = 30

DIFFICULTY_MARKERS = re.compile(
    r"\b(?:not|can't|don't|won't|never|problem|issue|struggle|difficult|hard)\b",
    re.IGNORECASE,
)

STOP_WORDS = re.compile(
    r"\b(?:i|me|my|myself|we|us|our|the|a|an|that|this|it|is|are|was|were|be|been|being|"
    r"have|has|had|do|does|did|will|would|could|should|may|might|must|shall|just|really|"
    r"very|so|too|also|even|only|now|then|here|there|when|where|why|how|what|which|who|"
    r"whom|whose)\b",
    re.IGNORECASE,
)

_RE_LEADING_I = re.compile(r'^i\s+', re.IGNORECASE)
_RE_WHITESPACE = re.compile(r'\s+')

ISSUE_STEP_TEMPLATE = "Write down specifically what's bothering you most about: \"{excerpt}...\""
CONTROL_STEP_TEMPLATE = "Spend 10 minutes on just one thing you control: {controllable}"


def capitalize_first(text: str) -> str:
    """Upper-case the first character only"""
    return text[:1].upper() + text[1:]


def clean_phrase(phrase: str) -> str:
    """Drop a leading "I", collapse whitespace, cap length"""
    cleaned = _RE_LEADING_I.sub('', phrase)
    cleaned = _RE_WHITESPACE.sub(' ', cleaned).strip()
    return cleaned[:MAX_CLEAN_PHRASE_LENGTH]


def extract_key_phrase(sentence: str) -> Optional[str]:
    """
    Reduce a sentence to its key words by stripping stop-words

    Args:
        sentence: A trimmed sentence

    Returns:
        Key phrase (max 60 chars), or None if too little is left
    """
    cleaned = STOP_WORDS.sub('', sentence)
    cleaned = _RE_WHITESPACE.sub(' ', cleaned).strip()
    if len(cleaned) > MIN_KEY_PHRASE_LENGTH:
        return cleaned[:MAX_KEY_PHRASE_LENGTH]
    return None


def _contains(items: Iterable[str], candidate: str) -> bool:
    """Case-insensitive exact-match check"""
    lowered = candidate.lower()
    return any(item.lower() == lowered for item in items)


def _collides(items: Iterable[str], candidate: str) -> bool:
    """Case-insensitive substring check in either direction"""
    lowered = candidate.lower()
    return any(lowered in item.lower() or item.lower() in lowered for item in items)


def _fill_from_table(items: List[str], table: PhraseTable, themes: Sequence[Theme], count: int,
                     is_duplicate: Callable[[Iterable[str], str], bool] = _contains) -> None:
    """Append table phrases theme by theme until count is reached"""
    for theme in themes:
        if len(items) >= count:
            break
        for phrase in phrases_for(table, theme):
            if len(items) >= count:
                break
            if not is_duplicate(items, phrase):
                items.append(phrase)


class SectionGenerator:
    """Generate the four output sections from extracted material"""

    def generate(self, context: PipelineContext, themes: Sequence[Theme],
                 concerns: Sequence[str], actions: Sequence[str], item_count: int,
                 sentences: Optional[Sequence[str]] = None) -> GeneratedSections:
        """
        Generate all four sections

        Args:
            context: Pipeline context for this call
            themes: Non-empty theme list from the classifier
            concerns: Extracted concern phrases
            actions: Extracted action phrases
            item_count: Items per section (2, 3 or 4)
            sentences: Sentences of the normalized text (split from context if omitted)

        Returns:
            GeneratedSections
        """
        if sentences is None:
            sentences = split_sentences(context.normalized_text)

        core_issues = self.generate_core_issues(themes, concerns, sentences, item_count)
        can_control = self.generate_controllables(themes, actions, item_count)
        let_go = self.generate_let_go(themes, item_count - 1)
        next_steps = self.generate_next_steps(core_issues, can_control, themes, item_count)

        logger.debug(
            f"Generated sections: {len(core_issues)} issues, {len(can_control)} controllables, "
            f"{len(let_go)} let-go, {len(next_steps)} steps"
        )

        return GeneratedSections(
            core_issues=core_issues,
            can_control=can_control,
            let_go=let_go,
            next_steps=next_steps,
        )

    def generate_core_issues(self, themes: Sequence[Theme], concerns: Sequence[str],
                             sentences: Sequence[str], count: int) -> List[str]:
        """
        Concerns, then difficulty sentences, then theme issues

        An issue that contains, or is contained in, an existing issue
        (ignoring case) is skipped in every phase.
        """
        issues: List[str] = []

        for concern in concerns:
            if len(issues) >= count:
                break
            issue = capitalize_first(clean_phrase(concern))
            if issue and not _collides(issues, issue):
                issues.append(issue)

        for sentence in sentences:
            if len(issues) >= count:
                break
            trimmed = sentence.strip()
            if len(trimmed) < MIN_ISSUE_SENTENCE_LENGTH or not DIFFICULTY_MARKERS.search(trimmed):
                continue
            key_phrase = extract_key_phrase(trimmed)
            if not key_phrase:
                continue
            prefix = key_phrase.lower()[:ISSUE_PREFIX_LENGTH]
            if any(prefix in existing.lower() for existing in issues) or _collides(issues, key_phrase):
                continue
            issues.append(capitalize_first(key_phrase))

        _fill_from_table(issues, THEME_ISSUES, themes, count, is_duplicate=_collides)
        return issues[:count]

    def generate_controllables(self, themes: Sequence[Theme], actions: Sequence[str],
                               count: int) -> List[str]:
        """Extracted actions, then theme controllables"""
        controllables: List[str] = []

        for action in actions:
            if len(controllables) >= count:
                break
            controllable = capitalize_first(clean_phrase(action))
            if controllable and not _contains(controllables, controllable):
                controllables.append(controllable)

        _fill_from_table(controllables, THEME_CONTROLLABLES, themes, count)
        return controllables[:count]

    def generate_let_go(self, themes: Sequence[Theme], count: int) -> List[str]:
        """Theme let-go phrases only; always at least one"""
        count = max(1, count)
        let_go: List[str] = []
        _fill_from_table(let_go, THEME_LET_GO, themes, count)
        return let_go[:count]

    def generate_next_steps(self, issues: Sequence[str], controllables: Sequence[str],
                            themes: Sequence[Theme], count: int) -> List[str]:
        """Two steps built from the first issue/controllable, then theme steps"""
        steps: List[str] = []

        if issues:
            steps.append(ISSUE_STEP_TEMPLATE.format(excerpt=issues[0][:ISSUE_EXCERPT_LENGTH]))

        if controllables:
            steps.append(CONTROL_STEP_TEMPLATE.format(controllable=controllables[0].lower()))

        for theme in themes:
            if len(steps) >= count:
                break
            for step in phrases_for(THEME_STEPS, theme):
                if len(steps) >= count:
                    break
                prefix = step.lower()[:STEP_PREFIX_LENGTH]
                if not any(prefix in existing.lower() for existing in steps):
                    steps.append(step)

        return steps[:count]
