# API routes
from fastapi import APIRouter
from dental_clinic.api.patients import router as patients_router
from dental_clinic.api.files import router as files_router
from dental_clinic.api.ai import router as ai_router
from dental_clinic.api.config import router as config_router

# Combine all routers
router = APIRouter()
router.include_router(patients_router)
router.include_router(files_router)
router.include_router(ai_router)
router.include_router(config_router)

__all__ = ["router"]
