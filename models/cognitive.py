"""
Cognitive processing data models
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List
import json


class LoadLevel(str, Enum):
    """Coarse structural complexity of the input"""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class OutputDensity(str, Enum):
    """How much content to generate per section"""
    DETAILED = "detailed"
    STANDARD = "standard"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class CognitiveInput:
    """Raw caller-supplied text"""
    text: str


@dataclass(frozen=True)
class LoadMetrics:
    """Structural signals measured on normalized text"""
    char_count: int
    word_count: int
    sentence_count: int
    line_count: int
    punctuation_count: int
    avg_sentence_length: float
    punctuation_ratio: float
    line_break_ratio: float

    def to_dict(self) -> dict:
        """Convert metrics to dictionary (camelCase wire keys)"""
        return {
            "charCount": self.char_count,
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "lineCount": self.line_count,
            "punctuationCount": self.punctuation_count,
            "avgSentenceLength": self.avg_sentence_length,
            "punctuationRatio": self.punctuation_ratio,
            "lineBreakRatio": self.line_break_ratio,
        }


@dataclass(frozen=True)
class LoadResult:
    """Cognitive load score, level and the metrics behind them"""
    score: int
    level: LoadLevel
    metrics: LoadMetrics

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level.value,
            "metrics": self.metrics.to_dict(),
        }


@dataclass(frozen=True)
class PipelineContext:
    """Everything generation needs for one call; built once, never shared"""
    original_text: str
    normalized_text: str
    load: LoadResult


SECTION_KEYS = ("coreIssues", "canControl", "letGo", "nextSteps")


@dataclass
class GeneratedSections:
    """The four output sections"""
    core_issues: List[str] = field(default_factory=list)
    can_control: List[str] = field(default_factory=list)
    let_go: List[str] = field(default_factory=list)
    next_steps: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "coreIssues": list(self.core_issues),
            "canControl": list(self.can_control),
            "letGo": list(self.let_go),
            "nextSteps": list(self.next_steps),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratedSections":
        """
        Create sections from a dictionary (e.g. a provider's JSON payload)

        Args:
            data: Dictionary with coreIssues, canControl, letGo, nextSteps

        Returns:
            GeneratedSections instance

        Raises:
            ValueError: If a section is missing, not a list, empty, or holds
                anything other than non-empty strings
        """
        if not isinstance(data, dict):
            raise ValueError("Sections payload must be an object")

        sections = {}
        for key in SECTION_KEYS:
            items = data.get(key)
            if not isinstance(items, list) or not items:
                raise ValueError(f"Section '{key}' must be a non-empty list")
            cleaned = []
            for item in items:
                if not isinstance(item, str) or not item.strip():
                    raise ValueError(f"Section '{key}' contains an invalid item: {item!r}")
                cleaned.append(item.strip())
            sections[key] = cleaned

        return cls(
            core_issues=sections["coreIssues"],
            can_control=sections["canControl"],
            let_go=sections["letGo"],
            next_steps=sections["nextSteps"],
        )


@dataclass(frozen=True)
class CognitiveOutput:
    """Externally visible result: sections merged with the load result"""
    sections: GeneratedSections
    load: LoadResult
    source: str = "rules"  # "rules" or "provider"

    @property
    def core_issues(self) -> List[str]:
        return self.sections.core_issues

    @property
    def can_control(self) -> List[str]:
        return self.sections.can_control

    @property
    def let_go(self) -> List[str]:
        return self.sections.let_go

    @property
    def next_steps(self) -> List[str]:
        return self.sections.next_steps

    def to_dict(self) -> dict:
        """Convert output to a plain dictionary for any wire format"""
        data = self.sections.to_dict()
        data["load"] = self.load.to_dict()
        data["source"] = self.source
        return data

    def to_json(self, indent: int = 2) -> str:
        """Convert output to JSON string"""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
