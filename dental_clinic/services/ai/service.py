"""
AI Diagnosis Assistant Service

Builds prompts from the patient history and dental chart markings, calls the
LLM and validates its reply against the diagnosis output schema.
"""
import json
from typing import Optional

from openai import OpenAI
from pydantic import ValidationError

from dental_clinic.core.config import Settings
from dental_clinic.core.exceptions import DiagnosisError
from dental_clinic.core.logging import get_logger
from dental_clinic.database.schemas import DiagnosisInput, DiagnosisOutput
from dental_clinic.services.ai.config import get_openai_client

logger = get_logger(__name__)

EMPTY_CHART = "No markings on chart."


def build_system_prompt() -> str:
    return (
        "You are an AI-powered dental diagnosis assistant. Analyze the patient's "
        "dental history and current chart markings to suggest potential diagnoses "
        "and treatment options.\n\n"
        "Respond with a JSON object with exactly these string fields:\n"
        '- "potentialDiagnoses": list of potential diagnoses\n'
        '- "suggestedTreatments": list of suggested treatment options\n'
        '- "confidenceLevel": one of high, medium or low'
    )


def build_user_prompt(data: DiagnosisInput) -> str:
    chart = data.chart_markings.strip() or EMPTY_CHART
    return (
        f"Patient History: {data.patient_history}\n"
        f"Chart Markings: {chart}\n\n"
        "Based on the provided information, please provide potential diagnoses, "
        "suggested treatments, and a confidence level for your suggestions."
    )


def call_llm(client: OpenAI, system_prompt: str, user_prompt: str, model: str) -> str:
    """
    Calls the LLM with the constructed prompts and returns the raw text reply
    """
    response = client.responses.create(
        model=model,
        input=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        text={"format": {"type": "json_object"}},
    )
    return response.output_text.strip()


def parse_diagnosis(raw: str) -> DiagnosisOutput:
    """
    Validate the LLM reply against the output schema

    Raises:
        DiagnosisError: If the reply is not JSON or misses required fields
    """
    try:
        return DiagnosisOutput.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        raise DiagnosisError(f"Invalid diagnosis payload: {e}") from e


def suggest_diagnosis(
    data: DiagnosisInput,
    settings: Settings,
    client: Optional[OpenAI] = None,
) -> DiagnosisOutput:
    """
    Main function to get diagnosis suggestions for a patient

    Args:
        data: Patient history and chart markings
        settings: Application settings (API key and model name)
        client: OpenAI client (built from settings if omitted)

    Returns:
        Validated diagnosis suggestions

    Raises:
        ValueError: If no API key is configured
        DiagnosisError: If the call fails or returns an invalid payload
    """
    if client is None:
        client = get_openai_client(settings)

    try:
        raw = call_llm(client, build_system_prompt(), build_user_prompt(data), settings.openai_model)
    except Exception as e:
        logger.exception("Diagnosis request failed")
        raise DiagnosisError(f"OpenAI API error: {e}") from e

    return parse_diagnosis(raw)
