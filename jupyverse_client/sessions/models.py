from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class Session(BaseModel):
    id: str
    kernel: dict[str, Any] | None = None
    name: str = ""
    path: str = ""
    type: str = ""


class CreateSessionBody(BaseModel):
    id: str | None = None
    kernel: dict[str, Any] | None = None
    name: str | None = None
    path: str | None = None
    type: str | None = None


class PatchSessionBody(BaseModel):
    id: str | None = None
    kernel: dict[str, Any] | None = None
    name: str | None = None
    path: str | None = None
    type: str | None = None
