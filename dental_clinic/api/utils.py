"""
Utility functions for API endpoints

Repositories and settings are built once by the app factory and kept on
app.state; endpoints fetch them from the request.
"""
from fastapi import Request

from dental_clinic.core.config import Settings
from dental_clinic.database.files import FileRepository
from dental_clinic.database.patients import PatientRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_patient_repository(request: Request) -> PatientRepository:
    return request.app.state.patients


def get_file_repository(request: Request) -> FileRepository:
    return request.app.state.files
