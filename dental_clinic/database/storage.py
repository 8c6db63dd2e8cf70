"""
Storage backends

- JSON files for the local store to avoid database setup complexity
- Each backend reads and writes one whole collection; no partial updates
- Remote drive backend is a placeholder returning fixture data until the
  drive API integration exists
"""
import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from dental_clinic.core.exceptions import StorageError
from dental_clinic.core.logging import get_logger

logger = get_logger(__name__)

REMOTE_SHARE_URL = "https://docs.google.com/a/example.com/file/d/mock_id/view?usp=sharing_eip_se_im"

REMOTE_FIXTURE_FILES: List[Dict[str, Any]] = [
    {
        "name": "panoramic_xray_gdrive.jpg",
        "url": "https://placehold.co/400x400.png",
        "type": "image",
        "hint": "dental x-ray",
        "provider": "remote",
    },
    {
        "name": "referral_letter_gdrive.pdf",
        "url": "",
        "type": "doc",
        "provider": "remote",
    },
]


def read_json(filepath: Path) -> Any:
    """
    Read a UTF-8 JSON document

    Raises FileNotFoundError untouched so callers can bootstrap the document.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(filepath: Path, data: Any):
    """
    Write data as pretty-printed JSON, replacing the document in one step
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


class StorageBackend(ABC):
    """
    Reads and writes a whole collection
    """

    @abstractmethod
    def read(self) -> Any:
        """Return the full collection, initializing it if missing"""

    @abstractmethod
    def write(self, collection: Any) -> bool:
        """Persist the full collection; returns False when nothing was stored"""


class JsonFileBackend(StorageBackend):
    """
    Local store: one JSON document at a fixed path

    empty_factory builds the empty collection (list for patients, dict for
    the files mapping).
    """

    def __init__(self, path: Path, empty_factory: Callable[[], Any] = list):
        self.path = Path(path)
        self.empty_factory = empty_factory

    def read(self) -> Any:
        try:
            data = read_json(self.path)
        except FileNotFoundError:
            logger.info("Creating empty document at %s", self.path)
            empty = self.empty_factory()
            self.write(empty)
            return empty
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Malformed JSON in %s: %s", self.path, e)
            raise StorageError(self.path, "Malformed JSON document") from e
        except OSError as e:
            logger.error("Failed to read %s: %s", self.path, e)
            raise StorageError(self.path, "Failed to read document") from e

        expected = type(self.empty_factory())
        if not isinstance(data, expected):
            logger.error(
                "Unexpected document shape in %s: expected %s, got %s",
                self.path, expected.__name__, type(data).__name__,
            )
            raise StorageError(self.path, "Unexpected document shape")
        return data

    def write(self, collection: Any) -> bool:
        try:
            write_json(self.path, collection)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write %s: %s", self.path, e)
            raise StorageError(self.path, "Failed to write document") from e
        return True


class RemoteListing:
    """
    Lookup-only view of the drive: answers every patient id with a copy of
    the fixtures

    Not a mapping; the drive cannot enumerate its patients, so only a
    per-patient lookup is offered.
    """

    def __init__(self, files: List[Dict[str, Any]]):
        self._files = files

    def files_for(self, patient_id: str) -> List[Dict[str, Any]]:
        return [dict(f) for f in self._files]


class RemoteDriveBackend(StorageBackend):
    """
    Placeholder for the cloud drive provider

    Reads return deterministic fixtures; writes are not implemented and
    report False so nothing claims remote durability.
    """

    def __init__(self, fixtures: Optional[List[Dict[str, Any]]] = None):
        self.fixtures = REMOTE_FIXTURE_FILES if fixtures is None else fixtures

    def read(self) -> RemoteListing:
        logger.info("[GDrive] Listing files from placeholder drive backend")
        return RemoteListing(self.fixtures)

    def write(self, collection: Any) -> bool:
        for patient_id, files in dict(collection).items():
            for f in files:
                logger.info(
                    "[GDrive] Upload of %r for patient %s not implemented; keeping local copy only",
                    f.get("name"), patient_id,
                )
        return False

    def share_url(self, file: Dict[str, Any]) -> str:
        logger.info("[GDrive] Sharing file %r via placeholder drive backend", file.get("name"))
        return REMOTE_SHARE_URL
