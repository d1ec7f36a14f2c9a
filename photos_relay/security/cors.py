from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from photos_relay.config import get_cors_origins


def setup_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
