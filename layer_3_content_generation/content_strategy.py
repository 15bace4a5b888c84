"""
Content strategies: where the four sections come from

RuleBasedStrategy runs the deterministic rule engine and is always
available. ProviderBackedStrategy delegates to an external content provider
under a timeout and reports every failure as ProviderUnavailableError, so
the pipeline can fall back to the rules.
"""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from concurrent.futures import Future, TimeoutError as FutureTimeoutError
from typing import Optional, Protocol

from models.cognitive import GeneratedSections, OutputDensity, PipelineContext
from layer_1_text_analysis.load_index import get_item_count
from layer_2_theme_extraction.classifier import ThemeClassifier
from layer_2_theme_extraction.phrase_extractor import (
    split_sentences,
    extract_concerns,
    extract_actions,
)
from layer_3_content_generation.section_generator import SectionGenerator
from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)


class ProviderUnavailableError(Exception):
    """The content provider failed, timed out, or returned unusable content"""


class ContentProvider(Protocol):
    """External collaborator that can write the sections instead of the rules"""

    name: str

    def generate(self, context: PipelineContext, density: OutputDensity) -> GeneratedSections:
        ...


class ContentStrategy(ABC):
    """Produces GeneratedSections for a pipeline context"""

    name = "strategy"

    @abstractmethod
    def generate(self, context: PipelineContext, density: OutputDensity) -> GeneratedSections:
        """Generate the four sections at the given density"""


class RuleBasedStrategy(ContentStrategy):
    """Deterministic theme/phrase/template engine"""

    name = "rules"

    def __init__(self, classifier: Optional[ThemeClassifier] = None,
                 generator: Optional[SectionGenerator] = None):
        self.classifier = classifier or ThemeClassifier()
        self.generator = generator or SectionGenerator()

    def generate(self, context: PipelineContext, density: OutputDensity) -> GeneratedSections:
        text = context.normalized_text
        sentences = split_sentences(text)
        item_count = get_item_count(density)

        themes = self.classifier.classify(text)
        concerns = extract_concerns(sentences)
        actions = extract_actions(sentences)

        logger.info(
            f"Rule engine: {len(sentences)} sentences, themes=[{', '.join(t.value for t in themes)}], "
            f"{len(concerns)} concerns, {len(actions)} actions, {item_count} items per section"
        )

        return self.generator.generate(
            context, themes, concerns, actions, item_count, sentences=sentences
        )


class ProviderBackedStrategy(ContentStrategy):
    """Delegate generation to a content provider, bounded by a timeout"""

    name = "provider"

    def __init__(self, provider: ContentProvider, timeout_seconds: Optional[float] = None):
        """
        Initialize provider-backed strategy

        Args:
            provider: Content provider to delegate to
            timeout_seconds: Max seconds to wait (defaults to settings.PROVIDER_TIMEOUT_SECONDS)
        """
        self.provider = provider
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.PROVIDER_TIMEOUT_SECONDS

    def generate(self, context: PipelineContext, density: OutputDensity) -> GeneratedSections:
        """
        Ask the provider for sections

        Raises:
            ProviderUnavailableError: On provider error, timeout, or invalid result
        """
        provider_name = getattr(self.provider, "name", type(self.provider).__name__)
        future = self._start_provider_call(context, density)
        try:
            result = future.result(timeout=self.timeout_seconds)
        except FutureTimeoutError as exc:
            raise ProviderUnavailableError(
                f"Provider '{provider_name}' timed out after {self.timeout_seconds}s"
            ) from exc
        except Exception as exc:
            raise ProviderUnavailableError(f"Provider '{provider_name}' failed: {exc}") from exc

        return self._validate(result, provider_name, density)

    def _start_provider_call(self, context: PipelineContext, density: OutputDensity) -> Future:
        """
        Run the provider call on a daemon thread

        A call abandoned after a timeout never blocks interpreter exit.
        """
        future: Future = Future()

        def run():
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(self.provider.generate(context, density))
            except Exception as exc:
                future.set_exception(exc)

        threading.Thread(target=run, name="content-provider", daemon=True).start()
        return future

    def _validate(self, result, provider_name: str, density: OutputDensity) -> GeneratedSections:
        """Accept GeneratedSections or a sections dict; enforce the item bound"""
        try:
            if isinstance(result, dict):
                result = GeneratedSections.from_dict(result)
            elif isinstance(result, GeneratedSections):
                result = GeneratedSections.from_dict(result.to_dict())
            else:
                raise ValueError(f"unexpected result type {type(result).__name__}")
        except ValueError as exc:
            raise ProviderUnavailableError(
                f"Provider '{provider_name}' returned unusable sections: {exc}"
            ) from exc

        item_count = get_item_count(density)
        return GeneratedSections(
            core_issues=_dedupe(result.core_issues)[:item_count],
            can_control=_dedupe(result.can_control)[:item_count],
            let_go=_dedupe(result.let_go)[:max(1, item_count - 1)],
            next_steps=_dedupe(result.next_steps)[:item_count],
        )


def _dedupe(items):
    """Drop case-insensitive repeats, keeping first occurrences"""
    seen = set()
    unique = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            unique.append(item)
    return unique
