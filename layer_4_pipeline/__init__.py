"""
Layer 4: Pipeline
- Cognitive Pipeline (normalize -> score -> context -> strategy -> output)
- Output Renderer (terminal text rendering)
"""
from .pipeline import CognitivePipeline, process_cognition
from .output_renderer import render_text, OUTPUT_SECTIONS

__all__ = [
    'CognitivePipeline',
    'process_cognition',
    'render_text',
    'OUTPUT_SECTIONS',
]
