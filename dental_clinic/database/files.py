"""
Patient file repository

- Files document maps patient id (string key) to files in upload order
- Optional remote drive backend is chosen once at construction; listings
  are the remote files followed by the local ones, not deduplicated
- Remote uploads are a placeholder: the entry is tagged remote but kept in
  the local store so it still shows up on the next listing
"""
from typing import List, Optional

from dental_clinic.core.logging import get_logger
from dental_clinic.database.schemas import DigitalFile, DigitalFileInput, ShareResult
from dental_clinic.database.storage import RemoteDriveBackend, StorageBackend

logger = get_logger(__name__)

REMOTE_DISABLED_ERROR = "Remote drive integration is not enabled."
NOT_SHAREABLE_ERROR = "This file cannot be shared directly. Only local files with data URLs are copyable."


class FileRepository:
    def __init__(self, local: StorageBackend, remote: Optional[RemoteDriveBackend] = None):
        self.local = local
        self.remote = remote

    @property
    def remote_enabled(self) -> bool:
        return self.remote is not None

    def _local_files(self, patient_id: int) -> List[DigitalFile]:
        return [DigitalFile.model_validate(f) for f in self.local.read().get(str(patient_id), [])]

    def _remote_files(self, patient_id: int) -> List[DigitalFile]:
        return [DigitalFile.model_validate(f) for f in self.remote.read().files_for(str(patient_id))]

    def list_for_patient(self, patient_id: int) -> List[DigitalFile]:
        """
        Files for a patient; empty when the patient has none
        """
        if self.remote_enabled:
            return self._remote_files(patient_id) + self._local_files(patient_id)
        return self._local_files(patient_id)

    def add_for_patient(self, patient_id: int, file: DigitalFileInput) -> DigitalFile:
        """
        Tag the file with the active provider and append it to the local store
        """
        provider = "remote" if self.remote_enabled else "local"
        new_file = DigitalFile(provider=provider, **file.model_dump())
        entry = new_file.model_dump(by_alias=True, exclude_none=True)
        key = str(patient_id)

        if self.remote_enabled:
            self.remote.write({key: [entry]})

        collection = self.local.read()
        collection.setdefault(key, []).append(entry)
        self.local.write(collection)
        logger.info("Added %s file %r for patient %s", provider, new_file.name, patient_id)
        return new_file

    def share(self, file: DigitalFile) -> ShareResult:
        """
        Produce a shareable URL for a file when its provider allows it
        """
        if file.provider == "remote":
            if not self.remote_enabled:
                return ShareResult(success=False, error=REMOTE_DISABLED_ERROR)
            return ShareResult(success=True, url=self.remote.share_url(file.model_dump()))

        if file.url.startswith("data:"):
            return ShareResult(success=True, url=file.url)

        logger.info("[Local] Sharing is not available for file %r", file.name)
        return ShareResult(success=False, error=NOT_SHAREABLE_ERROR)
