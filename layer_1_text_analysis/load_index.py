"""
Cognitive Load Index (CLI)

Measures the structural complexity of a piece of thinking - word volume,
sentence length, punctuation density and line breaks. It deliberately looks
at nothing else: no sentiment, no emotional keywords.
"""
import re

from models.cognitive import LoadLevel, LoadMetrics, LoadResult, OutputDensity

# Score thresholds: score <= LOW_MAX is LOW, score <= MEDIUM_MAX is MEDIUM, above is HIGH
LOW_MAX = 1
MEDIUM_MAX = 3

# Scoring conditions (each adds one point)
LONG_TEXT_WORDS = 150
VERY_LONG_TEXT_WORDS = 300
SHORT_SENTENCE_WORDS = 8
CHOPPY_SENTENCE_WORDS = 5
PUNCTUATION_RATIO_LIMIT = 0.12
LINE_BREAK_RATIO_LIMIT = 1.5

PUNCTUATION_CHARS = frozenset("!?.,:;")

_RE_SENTENCE_BOUNDARY = re.compile(r'[.!?]')

# Items per section for each output density
ITEM_COUNTS = {
    OutputDensity.DETAILED: 4,
    OutputDensity.STANDARD: 3,
    OutputDensity.MINIMAL: 2,
}

# Presentation pacing: higher load = slower, calmer reveal
DURATION_MULTIPLIERS = {
    LoadLevel.LOW: 1.0,
    LoadLevel.MEDIUM: 1.25,
    LoadLevel.HIGH: 1.5,
}


def measure(text: str) -> LoadMetrics:
    """
    Measure the structural signals of normalized text

    Args:
        text: Normalized text

    Returns:
        LoadMetrics for the text
    """
    words = len(text.split())
    sentences = len([segment for segment in _RE_SENTENCE_BOUNDARY.split(text) if segment])
    # A trailing newline yields an extra empty line, and "" still counts as one line
    lines = len(text.split('\n'))
    punctuation = sum(1 for char in text if char in PUNCTUATION_CHARS)

    return LoadMetrics(
        char_count=len(text),
        word_count=words,
        sentence_count=sentences,
        line_count=lines,
        punctuation_count=punctuation,
        avg_sentence_length=words / max(sentences, 1),
        punctuation_ratio=punctuation / max(words, 1),
        line_break_ratio=lines / max(sentences, 1),
    )


def score_metrics(metrics: LoadMetrics) -> int:
    """
    Score metrics: one point per structural condition, 0-6

    The second sentence-length condition flags choppy text
    (avg < CHOPPY_SENTENCE_WORDS); long rambling sentences are not scored.
    Sentence length is only scored when there are words at all, so empty
    text scores 0.
    """
    has_words = metrics.word_count > 0
    conditions = (
        metrics.word_count > LONG_TEXT_WORDS,
        metrics.word_count > VERY_LONG_TEXT_WORDS,
        has_words and metrics.avg_sentence_length < SHORT_SENTENCE_WORDS,
        has_words and metrics.avg_sentence_length < CHOPPY_SENTENCE_WORDS,
        metrics.punctuation_ratio > PUNCTUATION_RATIO_LIMIT,
        metrics.line_break_ratio > LINE_BREAK_RATIO_LIMIT,
    )
    return sum(1 for condition in conditions if condition)


def classify_load(score: int) -> LoadLevel:
    """Map a score to its load level"""
    if score <= LOW_MAX:
        return LoadLevel.LOW
    if score <= MEDIUM_MAX:
        return LoadLevel.MEDIUM
    return LoadLevel.HIGH


def calculate_load(text: str) -> LoadResult:
    """
    Calculate the Cognitive Load Index from normalized text

    Deterministic and total: empty text scores through the max(..., 1)
    floors instead of dividing by zero.

    Args:
        text: Normalized text

    Returns:
        LoadResult with score, level and metrics
    """
    metrics = measure(text)
    score = score_metrics(metrics)
    return LoadResult(score=score, level=classify_load(score), metrics=metrics)


def get_output_density(load: LoadResult) -> OutputDensity:
    """Higher cognitive load gets terser output"""
    if load.level == LoadLevel.HIGH:
        return OutputDensity.MINIMAL
    if load.level == LoadLevel.MEDIUM:
        return OutputDensity.STANDARD
    return OutputDensity.DETAILED


def get_item_count(density: OutputDensity) -> int:
    """Number of items per section for a density"""
    return ITEM_COUNTS[OutputDensity(density)]


def get_duration_multiplier(level: LoadLevel) -> float:
    """Animation/pacing multiplier for a load level"""
    return DURATION_MULTIPLIERS[LoadLevel(level)]
