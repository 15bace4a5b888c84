"""
Cognitive processing pipeline - orchestrates all layers for one input
1. Normalize the raw text
2. Score the Cognitive Load Index
3. Build the pipeline context
4. Generate sections (provider for privileged callers, rules otherwise)
5. Merge sections with the load result
"""
from typing import Optional

from models.cognitive import CognitiveInput, CognitiveOutput, PipelineContext
from layer_1_text_analysis.normalizer import normalize
from layer_1_text_analysis.load_index import calculate_load, get_output_density
from layer_3_content_generation.content_strategy import (
    ContentProvider,
    ContentStrategy,
    ProviderBackedStrategy,
    ProviderUnavailableError,
    RuleBasedStrategy,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class CognitivePipeline:
    """Stateless text-to-structure pipeline"""

    def __init__(self, provider: Optional[ContentProvider] = None,
                 rule_strategy: Optional[RuleBasedStrategy] = None,
                 provider_timeout: Optional[float] = None):
        """
        Initialize pipeline

        Args:
            provider: Optional external content provider used for privileged calls
            rule_strategy: Rule engine (creates default if not provided)
            provider_timeout: Seconds to wait for the provider (defaults to settings)
        """
        self.rule_strategy = rule_strategy or RuleBasedStrategy()
        self.provider_strategy = (
            ProviderBackedStrategy(provider, timeout_seconds=provider_timeout)
            if provider is not None else None
        )

    def build_context(self, cognitive_input: CognitiveInput) -> PipelineContext:
        """Normalize and score the input"""
        normalized_text = normalize(cognitive_input.text)
        load = calculate_load(normalized_text)
        return PipelineContext(
            original_text=cognitive_input.text,
            normalized_text=normalized_text,
            load=load,
        )

    def select_strategy(self, privileged: bool) -> ContentStrategy:
        """Provider for privileged callers when one is configured, rules otherwise"""
        if privileged and self.provider_strategy is not None:
            return self.provider_strategy
        return self.rule_strategy

    def process(self, cognitive_input: CognitiveInput, privileged: bool = False) -> CognitiveOutput:
        """
        Process one input into a cognitive output

        Never raises for any text: provider failures fall back to the rules.

        Args:
            cognitive_input: Raw input
            privileged: Whether the caller may use the external provider

        Returns:
            CognitiveOutput
        """
        context = self.build_context(cognitive_input)
        density = get_output_density(context.load)

        logger.info(
            f"Processing input: {context.load.metrics.word_count} words, "
            f"CLI score {context.load.score} ({context.load.level.value}), density '{density.value}'"
        )

        strategy = self.select_strategy(privileged)
        if strategy is self.provider_strategy:
            try:
                sections = strategy.generate(context, density)
                return CognitiveOutput(sections=sections, load=context.load, source=strategy.name)
            except ProviderUnavailableError as e:
                logger.warning(f"{e}. Falling back to rule engine.")
            except Exception as e:
                logger.error(f"Unexpected provider strategy error, falling back to rule engine: {e}", exc_info=True)

        sections = self.rule_strategy.generate(context, density)
        return CognitiveOutput(sections=sections, load=context.load, source=self.rule_strategy.name)


def process_cognition(text: str, privileged: bool = False,
                      pipeline: Optional[CognitivePipeline] = None) -> CognitiveOutput:
    """
    Process a text blob - main entry point for callers

    Args:
        text: Raw thought text
        privileged: Whether the caller may use the external provider
        pipeline: Pipeline to use (rules-only pipeline if not provided)

    Returns:
        CognitiveOutput
    """
    pipeline = pipeline or CognitivePipeline()
    return pipeline.process(CognitiveInput(text=text), privileged=privileged)
