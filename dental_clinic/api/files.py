"""
Digital file endpoints

Listing an unknown patient returns an empty list; sharing failures are
reported in the response body, not as HTTP errors.
"""
from typing import List
from fastapi import APIRouter, HTTPException, Request

from dental_clinic.core.exceptions import StorageError
from dental_clinic.core.logging import get_logger
from dental_clinic.database.schemas import DigitalFile, DigitalFileInput, ShareResult
from dental_clinic.api.utils import get_file_repository

logger = get_logger(__name__)

router = APIRouter()


@router.get("/patients/{patient_id}/files", response_model=List[DigitalFile], response_model_exclude_none=True)
async def list_files(patient_id: int, request: Request):
    try:
        return get_file_repository(request).list_for_patient(patient_id)
    except StorageError:
        logger.exception("Failed to list files for patient %s", patient_id)
        raise HTTPException(status_code=500, detail="Failed to load files.")


@router.post("/patients/{patient_id}/files", response_model=DigitalFile, response_model_exclude_none=True)
async def add_file(patient_id: int, file: DigitalFileInput, request: Request):
    """
    Upload file metadata for a patient

    The provider is chosen by configuration, not by the client.
    """
    try:
        return get_file_repository(request).add_for_patient(patient_id, file)
    except StorageError:
        logger.exception("Failed to add file for patient %s", patient_id)
        raise HTTPException(status_code=500, detail="Failed to add file.")


@router.post("/files/share", response_model=ShareResult, response_model_exclude_none=True)
async def share_file(file: DigitalFile, request: Request):
    """
    Share a file with a specialist
    """
    return get_file_repository(request).share(file)
