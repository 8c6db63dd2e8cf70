"""
AI Configuration

The API key and model come from the injected Settings; nothing here reads
the environment directly.
"""
from openai import OpenAI

from dental_clinic.core.config import Settings


def is_ai_enabled(settings: Settings) -> bool:
    return bool(settings.openai_api_key)


def get_openai_client(settings: Settings) -> OpenAI:
    """
    Build an OpenAI client from the configured key

    Raises:
        ValueError: If no API key is configured
    """
    if not is_ai_enabled(settings):
        raise ValueError(
            "OPENAI_API_KEY is not configured. "
            "Set it to use the AI diagnosis assistant."
        )
    return OpenAI(api_key=settings.openai_api_key)
