from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from photos_relay.config import settings
from photos_relay.errors import ALBUM_TITLE_REQUIRED, ClientInputError
from photos_relay.schemas import CreateAlbumRequest
from photos_relay.security.auth import require_access_token
from photos_relay.service.photos import create_album, list_albums

router = APIRouter(prefix="/albums", tags=["albums"])


@router.get("")
async def albums(
    access_token: str = Depends(require_access_token),
    page_size: int = Query(default=settings.default_page_size, alias="pageSize"),
    page_token: str | None = Query(default=None, alias="pageToken"),
) -> JSONResponse:
    result = await list_albums(access_token, page_size, page_token=page_token)
    return JSONResponse(status_code=result.status_code, content=result.data)


@router.post("")
async def new_album(
    access_token: str = Depends(require_access_token),
    request: CreateAlbumRequest | None = Body(default=None),
) -> JSONResponse:
    if request is None or not request.title or not request.title.strip():
        raise ClientInputError(ALBUM_TITLE_REQUIRED)

    result = await create_album(access_token, request.title)
    return JSONResponse(status_code=result.status_code, content=result.data)
