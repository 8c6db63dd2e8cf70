"""
FastAPI app

- Settings are resolved once and injected; repositories live on app.state
- Remote drive backend is wired in only when enabled
- Demo seeding runs at server startup, never at import time
- CORS configured for the web frontend
- Basic health check
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from the project .env file early
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

from dental_clinic.api import router
from dental_clinic.api.middleware import TimingMiddleware
from dental_clinic.core.config import Settings
from dental_clinic.core.logging import get_logger, setup_logging
from dental_clinic.database.files import FileRepository
from dental_clinic.database.patients import PatientRepository
from dental_clinic.database.storage import JsonFileBackend, RemoteDriveBackend
from dental_clinic.services.seed import seed_demo_patients

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.settings.seed_demo_data:
        seed_demo_patients(app.state.patients)
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()

    setup_logging(settings.log_level)
    logger.info(
        "Storage: remote_drive=%s database=%s data_dir=%s",
        settings.remote_storage_enabled, settings.database_enabled, settings.data_dir,
    )

    app = FastAPI(title="Dental Clinic", lifespan=lifespan)
    app.state.settings = settings
    app.state.patients = PatientRepository(
        JsonFileBackend(settings.patients_path, empty_factory=list), settings
    )
    app.state.files = FileRepository(
        JsonFileBackend(settings.files_path, empty_factory=dict),
        RemoteDriveBackend() if settings.remote_storage_enabled else None,
    )

    # Logs request duration for all requests
    app.add_middleware(TimingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """
        Basic health check
        """
        return {"status": "ok"}

    return app


app = create_app()
