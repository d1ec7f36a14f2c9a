from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from photos_relay.config import settings
from photos_relay.security.auth import require_access_token
from photos_relay.service.photos import list_media_items

router = APIRouter(prefix="/photos", tags=["photos"])


@router.get("")
async def photos(
    access_token: str = Depends(require_access_token),
    album_id: str | None = Query(default=None, alias="albumId"),
    page_size: int = Query(default=settings.default_page_size, alias="pageSize"),
    page_token: str | None = Query(default=None, alias="pageToken"),
) -> JSONResponse:
    """List the library, or search one album when ``albumId`` is given."""
    result = await list_media_items(access_token, page_size, page_token=page_token, album_id=album_id)
    return JSONResponse(status_code=result.status_code, content=result.data)
