"""
Render a cognitive output as plain text for the terminal
"""
from typing import List

from models.cognitive import CognitiveOutput
from layer_1_text_analysis.load_index import get_duration_multiplier
from config.settings import settings

# Section labels, in display order
OUTPUT_SECTIONS = [
    ("core_issues", "Core Issues"),
    ("can_control", "What You Can Control"),
    ("let_go", "What You Can Let Go (For Now)"),
    ("next_steps", "Clear Next Steps"),
]


def render_text(output: CognitiveOutput, include_load: bool = True) -> str:
    """
    Render the four sections with headings and an optional load footer

    Args:
        output: Cognitive output to render
        include_load: Append the CLI score, level and pacing multiplier

    Returns:
        Multi-line string
    """
    lines: List[str] = [settings.PRODUCT_NAME, settings.PRODUCT_TAGLINE, ""]

    for attribute, label in OUTPUT_SECTIONS:
        lines.append(label)
        lines.append("-" * len(label))
        for item in getattr(output, attribute):
            lines.append(f"  - {item}")
        lines.append("")

    if include_load:
        load = output.load
        lines.append(
            f"Cognitive load: {load.level.value} (score {load.score}/6, "
            f"{load.metrics.word_count} words, pacing x{get_duration_multiplier(load.level)})"
        )

    return "\n".join(lines).rstrip() + "\n"
