"""
Patient repository

Owns id assignment and lookup for patient records. Every add is a full
read-modify-write of the patients document with no locking; concurrent
writers must be serialized by the caller.
"""
from typing import List, Optional

from dental_clinic.core.config import Settings
from dental_clinic.core.logging import get_logger
from dental_clinic.database.schemas import Patient, PatientInput
from dental_clinic.database.storage import StorageBackend

logger = get_logger(__name__)

PLACEHOLDER_AVATAR_URL = "https://placehold.co/100x100.png"


class PatientRepository:
    def __init__(self, backend: StorageBackend, settings: Settings):
        self.backend = backend
        self.settings = settings

    def _check_database(self, operation: str):
        # Database persistence does not exist yet; say so instead of pretending
        if self.settings.database_enabled:
            logger.warning(
                "[Database] DATABASE_URL is set but database storage is not supported; "
                "%s uses the local JSON store",
                operation,
            )

    def list(self, search: Optional[str] = None) -> List[Patient]:
        """
        Patients in stored order

        With a search term, keeps patients whose name contains it
        (case-insensitive) or whose phone number contains it verbatim.
        """
        self._check_database("list")
        patients = [Patient.model_validate(p) for p in self.backend.read()]
        if not search:
            return patients
        term = search.lower()
        return [p for p in patients if term in p.name.lower() or search in p.phone]

    def get_by_id(self, patient_id: int) -> Optional[Patient]:
        """
        Linear lookup by id; None when no patient has that id
        """
        self._check_database("get_by_id")
        for p in self.backend.read():
            if p.get("id") == patient_id:
                return Patient.model_validate(p)
        return None

    def add(self, data: PatientInput) -> Patient:
        """
        Assign the next id, append and rewrite the whole collection

        Returns the created patient including its id and placeholder avatar.
        """
        self._check_database("add")
        patients = self.backend.read()
        next_id = max((p["id"] for p in patients), default=0) + 1
        patient = Patient(id=next_id, avatar_url=PLACEHOLDER_AVATAR_URL, **data.model_dump())
        self.backend.write(patients + [patient.model_dump(by_alias=True)])
        logger.info("Added patient %s", next_id)
        return patient
