"""
AI service module

Contains AI/LLM configuration and the diagnosis assistant.
"""

from dental_clinic.services.ai.config import (
    get_openai_client,
    is_ai_enabled,
)

from dental_clinic.services.ai.service import (
    build_system_prompt,
    build_user_prompt,
    call_llm,
    parse_diagnosis,
    suggest_diagnosis,
)

__all__ = [
    "get_openai_client",
    "is_ai_enabled",
    "build_system_prompt",
    "build_user_prompt",
    "call_llm",
    "parse_diagnosis",
    "suggest_diagnosis",
]
