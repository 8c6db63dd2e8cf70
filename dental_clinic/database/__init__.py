"""
Database module

Contains data models (schemas), storage backends and the repositories built
on top of them.
"""

# Export schemas
from dental_clinic.database.schemas import (
    Patient,
    PatientInput,
    DigitalFile,
    DigitalFileInput,
    ShareResult,
    DiagnosisInput,
    DiagnosisOutput,
)

# Export storage backends
from dental_clinic.database.storage import (
    read_json,
    write_json,
    StorageBackend,
    JsonFileBackend,
    RemoteDriveBackend,
)

# Export repositories
from dental_clinic.database.patients import PatientRepository, PLACEHOLDER_AVATAR_URL
from dental_clinic.database.files import FileRepository

__all__ = [
    # Schemas
    "Patient",
    "PatientInput",
    "DigitalFile",
    "DigitalFileInput",
    "ShareResult",
    "DiagnosisInput",
    "DiagnosisOutput",
    # Storage backends
    "read_json",
    "write_json",
    "StorageBackend",
    "JsonFileBackend",
    "RemoteDriveBackend",
    # Repositories
    "PatientRepository",
    "PLACEHOLDER_AVATAR_URL",
    "FileRepository",
]
