from __future__ import annotations

from urllib.parse import urlencode

from pydantic import BaseModel


class Content(BaseModel):
    name: str
    path: str
    last_modified: str | None = None
    created: str | None = None
    content: list[Content] | str | dict | None = None
    format: str | None = None
    mimetype: str | None = None
    size: int | None = None
    type: str
    writable: bool = False
    hash: str | None = None
    hash_algorithm: str | None = None


class GetContentsParams(BaseModel):
    type: str | None = None
    format: str | None = None
    content: int = 1
    hash: int = 0

    def encode(self) -> str:
        """Encode the non-default values as a query string."""
        params: dict[str, str] = {}
        if self.type:
            params["type"] = self.type
        if self.format:
            params["format"] = self.format
        if self.content != 1:
            params["content"] = str(self.content)
        if self.hash != 0:
            params["hash"] = str(self.hash)
        return urlencode(params)


class CreateContentsBody(BaseModel):
    copy_from: str | None = None
    ext: str | None = None
    type: str | None = None


class PatchContentsBody(BaseModel):
    path: str


class PutContentsBody(BaseModel):
    content: str | dict | None = None
    format: str | None = None
    type: str | None = None
    name: str | None = None
    path: str | None = None
