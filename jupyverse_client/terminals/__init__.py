from __future__ import annotations

from ..api import Api, _decode, _path
from .models import CreateTerminalBody, Terminal


class Terminals(Api):
    async def list_terminals(self) -> list[Terminal]:
        data = await self._send("GET", "terminals")
        return _decode(list[Terminal], data)

    async def create_terminal(self, body: CreateTerminalBody | None = None) -> Terminal:
        if body is None:
            body = CreateTerminalBody()
        data = await self._send("POST", "terminals", body)
        return _decode(Terminal, data)

    async def get_terminal(self, name: str) -> Terminal:
        data = await self._send("GET", _path("terminals", name))
        return _decode(Terminal, data)

    async def delete_terminal(self, name: str) -> None:
        await self._send("DELETE", _path("terminals", name))
