"""
Client configuration endpoint
"""
from fastapi import APIRouter, Request

from dental_clinic.api.utils import get_settings

router = APIRouter()


@router.get("/config/auth")
async def get_auth_config(request: Request):
    """
    Which external auth providers the UI should offer

    When no provider is enabled the UI treats every user as signed in.
    """
    return {"google": {"enabled": get_settings(request).auth_provider_enabled}}
