from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class KernelSpec(BaseModel):
    name: str
    spec: dict[str, Any] = {}
    resources: dict[str, str] = {}


class GetKernelSpecsResponse(BaseModel):
    default: str
    kernelspecs: dict[str, KernelSpec]


class Kernel(BaseModel):
    id: str
    name: str
    last_activity: str | None = None
    execution_state: str | None = None
    connections: int = 0


class CreateKernelBody(BaseModel):
    name: str | None = None
    path: str | None = None
