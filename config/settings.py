"""
Application settings and configuration

This file contains all the settings for the application.
Think of it like a control panel where you can adjust how the system works.

Most settings can be changed by creating a .env file in the project root.
If a setting isn't in .env, it uses the default value shown here.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file (if it exists)
# This lets you configure the app without changing code
load_dotenv()


class Settings:
    """
    Application configuration settings

    This class holds all the configuration for the entire application.
    You can change these values by setting environment variables in a .env file.
    """

    # ============================================================
    # Product
    # ============================================================
    # Shown in the header of the text rendering
    PRODUCT_NAME = os.getenv("PRODUCT_NAME", "THINKCLEAR")
    PRODUCT_TAGLINE = os.getenv("PRODUCT_TAGLINE", "Structured cognition for night thinkers")

    # ============================================================
    # Input Boundary
    # ============================================================
    # Maximum characters accepted by the command-line entry point.
    # The analysis engine itself never enforces a limit; this is the
    # caller's job.
    MAX_INPUT_CHARS = int(os.getenv("MAX_INPUT_CHARS", "5000"))

    # ============================================================
    # Content Provider Settings
    # ============================================================
    # Privileged callers can have their sections written by an LLM instead
    # of the rule engine. Leave LLM_PROVIDER empty to always use the rules.
    # Options: "" (rules only), "gemini", "openai", "anthropic"
    # (openai/anthropic are accepted but not implemented - they fall back to rules)
    LLM_PROVIDER = os.getenv("LLM_PROVIDER", "").strip().lower()
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")  # Your Google API key (required for gemini)
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")  # Which AI model to use
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.4"))

    # How long to wait for the provider before falling back to the rules.
    # The provider call must never block the caller indefinitely.
    PROVIDER_TIMEOUT_SECONDS = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "20.0"))

    # ============================================================
    # Logging Settings
    # ============================================================
    # How much detail to log
    # Options: DEBUG (very detailed), INFO (normal), WARNING (only problems), ERROR (only errors)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "")  # Where to save log files (empty = console only)

    # Provider names that mean "rule engine only"
    RULES_ONLY_PROVIDERS = ("", "none", "rules")

    @staticmethod
    def provider_enabled(provider_name=None) -> bool:
        """
        Check whether a content provider is configured

        Args:
            provider_name: Provider name to check (defaults to LLM_PROVIDER)

        Returns:
            True if the name selects a provider, False for rules-only mode
        """
        name = provider_name if provider_name is not None else Settings.LLM_PROVIDER
        return name.strip().lower() not in Settings.RULES_ONLY_PROVIDERS


# Global settings instance
settings = Settings()
