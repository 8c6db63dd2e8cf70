"""
Patient directory endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Request

from dental_clinic.core.exceptions import StorageError
from dental_clinic.core.logging import get_logger
from dental_clinic.database.schemas import Patient, PatientInput
from dental_clinic.api.utils import get_patient_repository

logger = get_logger(__name__)

router = APIRouter()


@router.get("/patients", response_model=List[Patient])
async def list_patients(request: Request, search: Optional[str] = None):
    """
    List patients in stored order

    Optional `search` filters by name (case-insensitive) or phone number.
    """
    try:
        return get_patient_repository(request).list(search=search)
    except StorageError:
        logger.exception("Failed to list patients")
        raise HTTPException(status_code=500, detail="Failed to load patients.")


@router.get("/patients/{patient_id}", response_model=Patient)
async def get_patient(patient_id: int, request: Request):
    """
    Get a single patient by id

    Returns 404 if no patient has this id.
    """
    try:
        patient = get_patient_repository(request).get_by_id(patient_id)
    except StorageError:
        logger.exception("Failed to load patient %s", patient_id)
        raise HTTPException(status_code=500, detail="Failed to load patient.")
    if patient is None:
        raise HTTPException(status_code=404, detail="Patient not found")
    return patient


@router.post("/patients", response_model=Patient)
async def add_patient(patient: PatientInput, request: Request):
    """
    Add a patient (intake form)

    The id and avatar are assigned by the repository; the created patient is
    returned so the client can navigate to it.
    """
    try:
        return get_patient_repository(request).add(patient)
    except StorageError:
        logger.exception("Failed to add patient")
        raise HTTPException(status_code=500, detail="Failed to add patient.")
