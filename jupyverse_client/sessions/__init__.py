from __future__ import annotations

from ..api import Api, _decode, _path
from .models import CreateSessionBody, PatchSessionBody, Session


class Sessions(Api):
    async def list_sessions(self) -> list[Session]:
        data = await self._send("GET", "sessions")
        return _decode(list[Session], data)

    async def create_session(self, body: CreateSessionBody) -> Session:
        data = await self._send("POST", "sessions", body)
        return _decode(Session, data)

    async def get_session(self, session_id: str) -> Session:
        data = await self._send("GET", _path("sessions", session_id))
        return _decode(Session, data)

    async def patch_session(self, session_id: str, body: PatchSessionBody) -> Session:
        data = await self._send("PATCH", _path("sessions", session_id), body)
        return _decode(Session, data)

    async def delete_session(self, session_id: str) -> None:
        await self._send("DELETE", _path("sessions", session_id))
