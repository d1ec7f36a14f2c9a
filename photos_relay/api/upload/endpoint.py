from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from photos_relay.errors import NO_FILE_UPLOADED, NO_FILES_UPLOADED, ClientInputError
from photos_relay.security.auth import optional_album_id, require_access_token
from photos_relay.service.photos import read_upload, upload_media_item, upload_media_items

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("")
async def upload(
    access_token: str = Depends(require_access_token),
    album_id: str | None = Depends(optional_album_id),
    file: UploadFile | None = File(default=None),
) -> JSONResponse:
    if file is None:
        raise ClientInputError(NO_FILE_UPLOADED)
    content = await read_upload(file)
    if not content:
        raise ClientInputError(NO_FILE_UPLOADED)

    result = await upload_media_item(access_token, file.filename or "upload", content, album_id)
    return JSONResponse(status_code=result.status_code, content=result.data)


@router.post("/multi")
async def upload_multi(
    access_token: str = Depends(require_access_token),
    album_id: str | None = Depends(optional_album_id),
    files: list[UploadFile] | None = File(default=None),
) -> JSONResponse:
    if not files:
        raise ClientInputError(NO_FILES_UPLOADED)

    result = await upload_media_items(access_token, files, album_id)
    return JSONResponse(status_code=result.status_code, content=result.data)
