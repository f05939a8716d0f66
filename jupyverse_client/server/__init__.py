from __future__ import annotations

from ..api import Api, _decode
from .models import GetMeResponse, GetStatusResponse, GetVersionResponse


class Server(Api):
    async def get_version(self) -> GetVersionResponse:
        data = await self._send("GET", "")
        return _decode(GetVersionResponse, data)

    async def get_status(self) -> GetStatusResponse:
        data = await self._send("GET", "status")
        return _decode(GetStatusResponse, data)

    async def get_me(self) -> GetMeResponse:
        data = await self._send("GET", "me")
        return _decode(GetMeResponse, data)
