"""
AI Diagnosis Assistant endpoints

Suggests potential diagnoses and treatments from the patient history and
the markings on the dental chart.
"""
from fastapi import APIRouter, HTTPException, Request

from dental_clinic.core.exceptions import DiagnosisError
from dental_clinic.core.logging import get_logger
from dental_clinic.database.schemas import DiagnosisInput, DiagnosisOutput
from dental_clinic.services.ai import service as diagnosis
from dental_clinic.services.ai.config import is_ai_enabled
from dental_clinic.api.utils import get_settings

logger = get_logger(__name__)

router = APIRouter()

DIAGNOSIS_ERROR = "An error occurred while getting AI diagnosis."


@router.post("/ai/diagnosis", response_model=DiagnosisOutput)
async def get_ai_diagnosis(request_body: DiagnosisInput, request: Request):
    settings = get_settings(request)
    if not is_ai_enabled(settings):
        raise HTTPException(
            status_code=503,
            detail="AI assistant is not configured. Please set OPENAI_API_KEY environment variable."
        )

    try:
        return diagnosis.suggest_diagnosis(request_body, settings)
    except DiagnosisError:
        logger.exception("AI diagnosis failed")
        raise HTTPException(status_code=502, detail=DIAGNOSIS_ERROR)
