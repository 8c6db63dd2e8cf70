"""
Request timing middleware

Every response carries X-Response-Time-Ms; server errors are logged at
WARNING so storage failures stand out from routine traffic.
"""
import logging
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from dental_clinic.core.logging import get_logger

logger = get_logger(__name__)

RESPONSE_TIME_HEADER = "X-Response-Time-Ms"


class TimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}"
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "[TIMING] %s %s | status=%s | duration=%.2fms",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response
