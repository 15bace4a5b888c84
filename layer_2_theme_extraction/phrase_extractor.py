"""
Phrase extraction from first-person sentences

Concern phrases come from confession/uncertainty phrasing ("I'm worried
about X", "what if X"); action phrases from intention phrasing ("I should X",
"maybe I could X"). Extraction is purely structural: each pattern captures
whatever follows the trigger words.
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

# Phrases must be longer than this (after trimming) to be kept
MIN_PHRASE_LENGTH = 5
MAX_CONCERN_LENGTH = 60
MAX_ACTION_LENGTH = 50

# Sentences no longer than this (after trimming) are ignored
MIN_SENTENCE_LENGTH = 5

_RE_SENTENCE_SPLIT = re.compile(r'[.!?]+')
_APOSTROPHE = "['’]"


@dataclass(frozen=True)
class ExtractionPattern:
    """A named capture pattern; group 1 is the extracted phrase"""
    name: str
    regex: re.Pattern
    max_length: int
    min_length: int = MIN_PHRASE_LENGTH

    def extract(self, sentence: str) -> Optional[str]:
        """
        Extract this pattern's phrase from a sentence

        Args:
            sentence: One sentence

        Returns:
            Trimmed, truncated phrase, or None if there is no usable match
        """
        match = self.regex.search(sentence)
        if not match or not match.group(1):
            return None
        phrase = match.group(1).strip()[:self.max_length]
        if len(phrase) > self.min_length:
            return phrase
        return None


def _pattern(name: str, regex: str, max_length: int) -> ExtractionPattern:
    return ExtractionPattern(name, re.compile(regex, re.IGNORECASE), max_length)


CONCERN_PATTERNS = [
    _pattern(
        "worried_about",
        rf"\bi(?:{_APOSTROPHE}m| am)\s+(?:worried|concerned|anxious|scared|afraid|unsure|confused|stuck|overwhelmed)"
        r"\s+(?:about|that|because)?\s*(.+)",
        MAX_CONCERN_LENGTH,
    ),
    _pattern(
        "dont_know",
        rf"\bi\s+(?:don{_APOSTROPHE}t|can{_APOSTROPHE}t|cannot|couldn{_APOSTROPHE}t)"
        r"\s+(?:know|understand|decide|figure out|see)\s*(.+)",
        MAX_CONCERN_LENGTH,
    ),
    _pattern("i_feel", r"\bi\s+(?:feel|felt)\s+(?:like|that|as if)?\s*(.+)", MAX_CONCERN_LENGTH),
    _pattern("what_if", r"\bwhat\s+(?:if|should)\s*(.+)", MAX_CONCERN_LENGTH),
    _pattern("i_keep", r"\bi\s+(?:keep|always|never|constantly)\s+(.+)", MAX_CONCERN_LENGTH),
]

ACTION_PATTERNS = [
    _pattern(
        "i_should",
        r"\bi\s+(?:should|could|might|need to|want to|have to|must)\s+(.+)",
        MAX_ACTION_LENGTH,
    ),
    _pattern("maybe_i_could", r"\bmaybe\s+i\s+(?:should|could|can)\s+(.+)", MAX_ACTION_LENGTH),
    _pattern(
        "i_was_thinking",
        r"\bi\s+(?:was thinking|thought about|considered)\s+(.+)",
        MAX_ACTION_LENGTH,
    ),
]


def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences on runs of . ! ?

    Args:
        text: Normalized text

    Returns:
        Sentences longer than MIN_SENTENCE_LENGTH once trimmed (untrimmed)
    """
    return [
        sentence for sentence in _RE_SENTENCE_SPLIT.split(text)
        if len(sentence.strip()) > MIN_SENTENCE_LENGTH
    ]


class PhraseExtractor:
    """Run an ordered pattern table over sentences"""

    def __init__(self, patterns: Sequence[ExtractionPattern]):
        self.patterns = list(patterns)

    def extract(self, sentences: Sequence[str]) -> List[str]:
        """
        Extract phrases in sentence order, then pattern order

        A sentence can yield one phrase per matching pattern.
        """
        phrases: List[str] = []
        for sentence in sentences:
            for pattern in self.patterns:
                phrase = pattern.extract(sentence)
                if phrase:
                    phrases.append(phrase)
        return phrases


concern_extractor = PhraseExtractor(CONCERN_PATTERNS)
action_extractor = PhraseExtractor(ACTION_PATTERNS)


def extract_concerns(sentences: Sequence[str]) -> List[str]:
    """Extract worry/uncertainty phrases"""
    return concern_extractor.extract(sentences)


def extract_actions(sentences: Sequence[str]) -> List[str]:
    """Extract intention phrases"""
    return action_extractor.extract(sentences)
