from __future__ import annotations

from ..api import Api, _decode, _path
from .models import (
    Content,
    CreateContentsBody,
    GetContentsParams,
    PatchContentsBody,
    PutContentsBody,
)


class Contents(Api):
    async def get_contents(
        self,
        path: str = "",
        params: GetContentsParams | None = None,
    ) -> Content:
        url = _path("contents", path)
        if params is not None:
            query = params.encode()
            if query:
                url = f"{url}?{query}"
        data = await self._send("GET", url)
        return _decode(Content, data)

    async def create_contents(
        self,
        path: str = "",
        body: CreateContentsBody | None = None,
    ) -> Content:
        """Create a new file, notebook or directory under the parent directory ``path``."""
        if body is None:
            body = CreateContentsBody()
        data = await self._send("POST", _path("contents", path), body)
        return _decode(Content, data)

    async def patch_contents(self, path: str, body: PatchContentsBody) -> Content:
        data = await self._send("PATCH", _path("contents", path), body)
        return _decode(Content, data)

    async def put_contents(self, path: str, body: PutContentsBody) -> Content:
        data = await self._send("PUT", _path("contents", path), body)
        return _decode(Content, data)

    async def delete_contents(self, path: str) -> None:
        await self._send("DELETE", _path("contents", path))
