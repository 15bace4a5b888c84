"""
Layer 3: Content Generation
- Section tables (per-theme fallback phrases)
- Section Generator (rule engine: extracted phrases first, tables after)
- Content strategies (rule-based, provider-backed)
- Content providers (Gemini, placeholders for unimplemented providers)
"""
from .section_generator import SectionGenerator, capitalize_first, clean_phrase, extract_key_phrase
from .content_strategy import (
    ContentStrategy,
    RuleBasedStrategy,
    ProviderBackedStrategy,
    ProviderUnavailableError,
)
from .content_provider import GeminiContentProvider, UnimplementedProvider, build_content_provider

__all__ = [
    'SectionGenerator',
    'capitalize_first',
    'clean_phrase',
    'extract_key_phrase',
    'ContentStrategy',
    'RuleBasedStrategy',
    'ProviderBackedStrategy',
    'ProviderUnavailableError',
    'GeminiContentProvider',
    'UnimplementedProvider',
    'build_content_provider',
]
