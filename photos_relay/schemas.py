from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator


class SimpleMediaItem(BaseModel):
    uploadToken: str


class NewMediaItem(BaseModel):
    simpleMediaItem: SimpleMediaItem


class MediaItemCreateRequest(BaseModel):
    albumId: str | None = None
    newMediaItems: list[NewMediaItem] = Field(default_factory=list)

    @classmethod
    def from_tokens(cls, upload_tokens: list[str], album_id: str | None = None) -> "MediaItemCreateRequest":
        return cls(
            albumId=album_id if album_id and album_id.strip() else None,
            newMediaItems=[
                NewMediaItem(simpleMediaItem=SimpleMediaItem(uploadToken=token))
                for token in upload_tokens
            ],
        )


class MediaSearchRequest(BaseModel):
    albumId: str
    pageSize: int
    pageToken: str | None = None


class CreateAlbumRequest(BaseModel):
    title: str | None = Field(default=None, validation_alias=AliasChoices("title", "Title"))

    @field_validator("title", mode="before")
    @classmethod
    def _non_string_title_is_missing(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class AlbumTitle(BaseModel):
    title: str


class AlbumCreateBody(BaseModel):
    album: AlbumTitle
