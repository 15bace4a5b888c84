"""
Layer 1: Text Analysis
- Normalizer (canonical whitespace, paragraph breaks preserved)
- Cognitive Load Index (structural complexity score and level)
"""
from .normalizer import normalize
from .load_index import (
    calculate_load,
    classify_load,
    measure,
    score_metrics,
    get_output_density,
    get_item_count,
    get_duration_multiplier,
    LOW_MAX,
    MEDIUM_MAX,
)

__all__ = [
    'normalize',
    'calculate_load',
    'classify_load',
    'measure',
    'score_metrics',
    'get_output_density',
    'get_item_count',
    'get_duration_multiplier',
    'LOW_MAX',
    'MEDIUM_MAX',
]
