from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class GetVersionResponse(BaseModel):
    version: str


class GetStatusResponse(BaseModel):
    started: str | None = None
    last_activity: str | None = None
    connections: int | None = None
    kernels: int | None = None


class GetMeResponse(BaseModel):
    identity: dict[str, Any] = {}
    permissions: dict[str, Any] = {}
