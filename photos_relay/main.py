import uvicorn
from fastapi import FastAPI

from photos_relay.api.albums.endpoint import router as albums_router
from photos_relay.api.health.endpoint import router as health_router
from photos_relay.api.photos.endpoint import router as photos_router
from photos_relay.api.upload.endpoint import router as upload_router
from photos_relay.config import settings
from photos_relay.errors import setup_error_handlers
from photos_relay.observability import RequestLoggingMiddleware, configure_logging
from photos_relay.security.cors import setup_cors

configure_logging()

app = FastAPI(title="Google Photos Relay", version="0.1.0")
app.add_middleware(RequestLoggingMiddleware)
setup_cors(app)
setup_error_handlers(app)

app.include_router(health_router)
app.include_router(upload_router, prefix=settings.api_prefix)
app.include_router(photos_router, prefix=settings.api_prefix)
app.include_router(albums_router, prefix=settings.api_prefix)


def run() -> None:
    uvicorn.run("photos_relay.main:app", host=settings.host, port=settings.port)
