import json
import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from photos_relay.config import settings

# Extras attached by the access log and the relay service.
LOG_FIELDS = (
    "request_id",
    "method",
    "path",
    "status_code",
    "latency_ms",
    "client_ip",
    "upstream_status",
    "upload_filename",
)


class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in LOG_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _formatter() -> logging.Formatter:
    if settings.log_json:
        return JsonLogFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")


def configure_logging() -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(_formatter())
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root.addHandler(handler)


access_logger = logging.getLogger("photos_relay.access")


def _access_fields(request: Request, request_id: str, status_code: int, started: float) -> dict:
    # The X-Google-AccessToken header is never logged.
    return {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "latency_ms": round((time.perf_counter() - started) * 1000.0, 2),
        "client_ip": request.client.host if request.client else None,
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags every response with ``x-request-id`` and writes one access-log line."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            access_logger.exception(
                "request_failed", extra=_access_fields(request, request_id, 500, started)
            )
            raise

        access_logger.info(
            "request_complete",
            extra=_access_fields(request, request_id, response.status_code, started),
        )
        response.headers["x-request-id"] = request_id
        return response
