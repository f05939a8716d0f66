from __future__ import annotations

from pydantic import BaseModel


class Terminal(BaseModel):
    name: str
    last_activity: str | None = None


class CreateTerminalBody(BaseModel):
    name: str | None = None
    cwd: str | None = None
