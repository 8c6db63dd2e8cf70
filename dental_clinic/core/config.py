"""
Basic configuration

- Built once at startup from environment variables and passed into the app
- Flags select which storage backends are active (remote drive, database)
- CORS origins for development and production
"""
import os
from pathlib import Path
from typing import List, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field

# Default localhost origins for development
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:9002",
]

TRUE_MARKERS = {"true", "1", "yes"}


def _is_true(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in TRUE_MARKERS


def _is_set(value: Optional[str]) -> bool:
    return bool((value or "").strip())


def _split_origins(value: Optional[str]) -> List[str]:
    if not value:
        return []
    # Filter out empty strings from split
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings(BaseModel):
    """
    Process-wide, read-only settings

    Constructed once (see from_env) and injected into the repositories.
    """
    model_config = ConfigDict(frozen=True)

    remote_storage_enabled: bool  = Field(False, description="Remote drive provider is active for patient files")
    database_enabled: bool        = Field(False, description="A database URL was configured (persistence still local)")
    auth_provider_enabled: bool   = Field(False, description="External auth provider configured; consumed by the UI only")
    data_dir: Path                = Field(Path("data"), description="Directory holding the JSON documents")
    cors_origins: List[str]       = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    seed_demo_data: bool          = Field(False, description="Seed the demo patient directory when empty")
    log_level: str                = Field("INFO")
    openai_model: str             = Field("gpt-4o")
    openai_api_key: Optional[str] = Field(None, repr=False, description="Enables the AI diagnosis assistant when set")

    @property
    def patients_path(self) -> Path:
        return self.data_dir / "patients.json"

    @property
    def files_path(self) -> Path:
        return self.data_dir / "files.json"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables

        Each storage flag is independent and only checks for the presence of
        its own marker.
        """
        env = os.environ if environ is None else environ
        return cls(
            remote_storage_enabled=_is_true(env.get("GOOGLE_DRIVE_ENABLED")),
            database_enabled=_is_set(env.get("DATABASE_URL")),
            auth_provider_enabled=_is_set(env.get("GOOGLE_CLIENT_ID")),
            data_dir=Path(env.get("CLINIC_DATA_DIR") or "data"),
            cors_origins=DEFAULT_CORS_ORIGINS + _split_origins(env.get("CORS_ORIGINS")),
            seed_demo_data=_is_true(env.get("SEED_DEMO_DATA")),
            log_level=env.get("LOG_LEVEL") or "INFO",
            openai_model=env.get("OPENAI_MODEL") or "gpt-4o",
            openai_api_key=env.get("OPENAI_API_KEY") or None,
        )
