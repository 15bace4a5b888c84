"""
External content providers for privileged callers

A provider writes the four sections with an LLM instead of the rule engine.
Providers may raise anything; ProviderBackedStrategy turns every failure
into a fallback to the rules.
"""
from typing import Optional

from models.cognitive import GeneratedSections, OutputDensity, PipelineContext
from layer_1_text_analysis.load_index import get_item_count
from config.settings import Settings, settings
from utils.llm_client import LLMClient
from utils.logger import get_logger

logger = get_logger(__name__)

# Provider names accepted in LLM_PROVIDER that have no implementation yet
UNIMPLEMENTED_PROVIDERS = ("openai", "anthropic")

DENSITY_GUIDANCE = {
    OutputDensity.DETAILED: "The writer's thinking is fairly structured. You may be thorough.",
    OutputDensity.STANDARD: "The writer's thinking is moderately dense. Keep items short.",
    OutputDensity.MINIMAL: "The writer's thinking is dense and fragmented. Be extremely brief and calm.",
}


class GeminiContentProvider:
    """Generate sections with Gemini"""

    name = "gemini"

    def __init__(self, llm_client: Optional[LLMClient] = None):
        """
        Initialize Gemini provider

        Args:
            llm_client: LLM client instance (creates new one if not provided)
        """
        self.llm_client = llm_client or LLMClient()

    def generate(self, context: PipelineContext, density: OutputDensity) -> GeneratedSections:
        """
        Generate sections for a context

        Raises:
            ValueError: If the model response is not a valid sections object
        """
        density = OutputDensity(density)
        prompt = self._build_prompt(context, density)
        data = self.llm_client.generate_json(prompt)
        sections = GeneratedSections.from_dict(data)

        item_count = get_item_count(density)
        logger.info(f"Gemini returned sections at density '{density.value}' ({item_count} items max)")
        return GeneratedSections(
            core_issues=sections.core_issues[:item_count],
            can_control=sections.can_control[:item_count],
            let_go=sections.let_go[:max(1, item_count - 1)],
            next_steps=sections.next_steps[:item_count],
        )

    def _build_prompt(self, context: PipelineContext, density: OutputDensity) -> str:
        """
        Build the structuring prompt

        Args:
            context: Pipeline context (only the normalized text is sent)
            density: Output density

        Returns:
            Prompt string
        """
        item_count = get_item_count(density)
        let_go_count = max(1, item_count - 1)

        prompt = f"""You help a person turn a stream of unstructured thoughts into calm, clear structure.

Thoughts:

{context.normalized_text}

Constraints:

1. Do not diagnose, label emotions, or give therapy. Describe structure, not feelings.
2. Stay concrete and grounded in what the person actually wrote.
3. {DENSITY_GUIDANCE[density]}
4. Produce:
   - "coreIssues": up to {item_count} short phrases naming the central issues
   - "canControl": up to {item_count} things within the person's control
   - "letGo": up to {let_go_count} things to let go of for now
   - "nextSteps": up to {item_count} small, specific next actions
5. No duplicates within a list. Each item under 15 words.

Output JSON:

{{
  "coreIssues": ["..."],
  "canControl": ["..."],
  "letGo": ["..."],
  "nextSteps": ["..."]
}}

Return ONLY valid JSON, no markdown or additional text."""

        return prompt


class UnimplementedProvider:
    """Placeholder for a provider name that is accepted but not built yet"""

    def __init__(self, name: str):
        self.name = name

    def generate(self, context: PipelineContext, density: OutputDensity) -> GeneratedSections:
        raise NotImplementedError(f"Provider '{self.name}' is configured but not implemented")


def build_content_provider(provider_name: Optional[str] = None):
    """
    Build the configured content provider

    Args:
        provider_name: Provider name (defaults to settings.LLM_PROVIDER)

    Returns:
        Provider instance, or None when the rule engine should always be used
    """
    name = (provider_name if provider_name is not None else settings.LLM_PROVIDER).strip().lower()

    if not Settings.provider_enabled(name):
        return None

    if name == "gemini":
        if not settings.GEMINI_API_KEY:
            logger.warning("LLM_PROVIDER is 'gemini' but GEMINI_API_KEY is not set - using rules only")
            return None
        return GeminiContentProvider()

    if name in UNIMPLEMENTED_PROVIDERS:
        logger.warning(f"Provider '{name}' configured but not implemented - privileged calls will use rules")
        return UnimplementedProvider(name)

    logger.warning(f"Unknown LLM_PROVIDER '{name}' - using rules only")
    return None
