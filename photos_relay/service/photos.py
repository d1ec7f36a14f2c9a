"""Relay operations against the Google Photos Library API.

Each operation issues its outbound calls in order, awaiting each one, and hands
back the downstream JSON untouched. Failures surface as ``UpstreamError`` (Google
answered with a non-success status) or ``TransportError`` (the call or the decode
blew up); nothing is retried.
"""

import logging
from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx
from fastapi import UploadFile

from photos_relay.adapter.client.http import bearer_headers, get, post_bytes, post_json
from photos_relay.config import settings
from photos_relay.errors import TransportError, UpstreamError
from photos_relay.schemas import AlbumCreateBody, AlbumTitle, MediaItemCreateRequest, MediaSearchRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayResult:
    status_code: int
    data: Any


def _url(path: str) -> str:
    return f"{settings.google_photos_base_url.rstrip('/')}/{path}"


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def upload_file_name(filename: str) -> str:
    # Header values must be ASCII.
    return filename if filename.isascii() else quote(filename)


async def _send(request: Awaitable[httpx.Response], operation: str, **log_extra: Any) -> httpx.Response:
    try:
        response = await request
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation, extra=log_extra)
        raise TransportError(_describe(exc)) from exc

    if not response.is_success:
        logger.warning(
            "%s failed: %s %s",
            operation,
            response.status_code,
            response.text,
            extra={"upstream_status": response.status_code, **log_extra},
        )
        raise UpstreamError(response.status_code, response.text)
    return response


def _parse(response: httpx.Response, operation: str) -> RelayResult:
    try:
        data = response.json()
    except ValueError as exc:
        logger.exception("Could not decode %s response", operation)
        raise TransportError(_describe(exc)) from exc
    return RelayResult(status_code=response.status_code, data=data)


async def read_upload(file: UploadFile) -> bytes:
    try:
        return await file.read()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error reading uploaded file", extra={"upload_filename": file.filename})
        raise TransportError(_describe(exc)) from exc


async def upload_raw(access_token: str, filename: str, content: bytes) -> str:
    """POST raw bytes to ``uploads`` and return the trimmed upload token."""
    headers = bearer_headers(
        access_token,
        {
            "Content-Type": "application/octet-stream",
            "X-Goog-Upload-File-Name": upload_file_name(filename),
            "X-Goog-Upload-Protocol": "raw",
        },
    )
    response = await _send(
        post_bytes(_url("uploads"), content, headers),
        "Upload (raw)",
        upload_filename=filename,
    )
    return response.text.strip()


async def batch_create(
    access_token: str,
    upload_tokens: list[str],
    album_id: str | None = None,
) -> RelayResult:
    """Turn upload tokens into media items with one ``mediaItems:batchCreate`` call."""
    body = MediaItemCreateRequest.from_tokens(upload_tokens, album_id).model_dump(exclude_none=True)
    response = await _send(
        post_json(_url("mediaItems:batchCreate"), body, bearer_headers(access_token)),
        "mediaItems:batchCreate",
    )
    return _parse(response, "mediaItems:batchCreate")


async def upload_media_item(
    access_token: str,
    filename: str,
    content: bytes,
    album_id: str | None = None,
) -> RelayResult:
    upload_token = await upload_raw(access_token, filename, content)
    return await batch_create(access_token, [upload_token], album_id)


async def upload_media_items(
    access_token: str,
    files: Sequence[UploadFile],
    album_id: str | None = None,
) -> RelayResult:
    """Upload files one after another, then batch-create them together.

    The first failed upload aborts the request; later files are never sent.
    """
    upload_tokens: list[str] = []
    for file in files:
        content = await read_upload(file)
        upload_tokens.append(await upload_raw(access_token, file.filename or "upload", content))
    return await batch_create(access_token, upload_tokens, album_id)


async def list_media_items(
    access_token: str,
    page_size: int,
    page_token: str | None = None,
    album_id: str | None = None,
) -> RelayResult:
    page_token = page_token if page_token and page_token.strip() else None
    headers = bearer_headers(access_token)

    if album_id and album_id.strip():
        body = MediaSearchRequest(albumId=album_id, pageSize=page_size, pageToken=page_token)
        request = post_json(_url("mediaItems:search"), body.model_dump(exclude_none=True), headers)
    else:
        params: dict[str, str | int] = {"pageSize": page_size}
        if page_token:
            params["pageToken"] = page_token
        request = get(_url("mediaItems"), headers, params=params)

    response = await _send(request, "Photos API")
    return _parse(response, "Photos API")


async def list_albums(access_token: str, page_size: int, page_token: str | None = None) -> RelayResult:
    params: dict[str, str | int] = {"pageSize": page_size}
    if page_token and page_token.strip():
        params["pageToken"] = page_token
    response = await _send(get(_url("albums"), bearer_headers(access_token), params=params), "Albums list")
    return _parse(response, "Albums list")


async def create_album(access_token: str, title: str) -> RelayResult:
    body = AlbumCreateBody(album=AlbumTitle(title=title)).model_dump()
    response = await _send(post_json(_url("albums"), body, bearer_headers(access_token)), "Create album")
    return _parse(response, "Create album")
