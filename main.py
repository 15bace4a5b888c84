"""
Main entry point for the application

Takes a block of unstructured thoughts and prints it back as four clear
sections (core issues, what you can control, what you can let go, next
steps) together with its Cognitive Load Index.

Usage:
    python main.py "I'm worried about my job. I should talk to my manager."
    python main.py --file thoughts.txt --json
    cat thoughts.txt | python main.py --privileged

Flags:
    --file PATH, -f PATH   Read the thoughts from a file
    --privileged, -p       Allow the configured LLM provider (LLM_PROVIDER)
    --json, -j             Print JSON instead of the text rendering
"""
import sys

from layer_3_content_generation.content_provider import build_content_provider
from layer_4_pipeline.pipeline import CognitivePipeline, process_cognition
from layer_4_pipeline.output_renderer import render_text
from config.settings import settings
from utils.logger import get_logger

# Set up logging so we can see what's happening
logger = get_logger(__name__)

FLAGS = {"--privileged", "-p", "--json", "-j"}
FILE_FLAGS = {"--file", "-f"}


def read_input(args: list) -> str:
    """
    Work out where the thoughts come from

    Args:
        args: Command-line arguments (without the program name)

    Returns:
        The raw input text
    """
    for idx, arg in enumerate(args):
        if arg in FILE_FLAGS:
            if idx + 1 >= len(args):
                raise ValueError(f"{arg} needs a file path")
            with open(args[idx + 1], 'r', encoding='utf-8') as f:
                return f.read()

    positional = [
        arg for idx, arg in enumerate(args)
        if arg not in FLAGS and arg not in FILE_FLAGS
        and not (idx > 0 and args[idx - 1] in FILE_FLAGS)
    ]
    if positional:
        return " ".join(positional)

    return sys.stdin.read()


def main(args=None) -> int:
    """
    Main entry point - process one input and print the result

    Returns:
        0 on success, 1 on error, 2 on invalid input
    """
    args = sys.argv[1:] if args is None else args
    privileged = "--privileged" in args or "-p" in args
    as_json = "--json" in args or "-j" in args

    try:
        text = read_input(args)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read input: {e}")
        return 2

    if len(text) > settings.MAX_INPUT_CHARS:
        logger.error(f"Input is {len(text)} characters; the limit is {settings.MAX_INPUT_CHARS}")
        return 2

    try:
        pipeline = CognitivePipeline(provider=build_content_provider())
        output = process_cognition(text, privileged=privileged, pipeline=pipeline)

        if as_json:
            print(output.to_json())
        else:
            print(render_text(output))

        logger.info(f"✅ Done ({output.source}, CLI {output.load.level.value})")
        return 0  # Return 0 means "success"

    except Exception as e:
        # If something goes wrong, log the error and return 1 (error code)
        logger.error(f"Error processing input: {e}", exc_info=True)
        return 1


# This part runs when you execute this file directly (not when imported)
if __name__ == "__main__":
    sys.exit(main())
