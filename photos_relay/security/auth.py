from fastapi import Header

from photos_relay.errors import MISSING_ACCESS_TOKEN, ClientInputError


def require_access_token(
    access_token: str | None = Header(default=None, alias="X-Google-AccessToken"),
) -> str:
    if not access_token or not access_token.strip():
        raise ClientInputError(MISSING_ACCESS_TOKEN)
    return access_token


def optional_album_id(
    album_id: str | None = Header(default=None, alias="X-Google-AlbumId"),
) -> str | None:
    if not album_id or not album_id.strip():
        return None
    return album_id
