from __future__ import annotations

from typing import TypeVar
from urllib.parse import quote

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import ClientConfig
from .exceptions import DecodeError, StatusError, TransportError

logger = structlog.get_logger()

JSON_CONTENT_TYPE = "application/json"

T = TypeVar("T")


class Api:
    """Base of every resource group: holds the configuration and sends requests.

    Each call opens its own ``httpx.AsyncClient``, so an instance carries no
    connection state and can be shared between tasks.
    """

    _config: ClientConfig
    _transport: httpx.AsyncBaseTransport | None

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def _request(
        self,
        method: str,
        path: str,
        content_type: str = JSON_CONTENT_TYPE,
        body: bytes | None = None,
    ) -> bytes:
        url = f"{self._config.url}/{path}"
        headers = {
            "Authorization": f"Bearer {self._config.token}",
            "Content-Type": content_type,
        }
        logger.debug("Sending request", method=method, url=url)
        try:
            async with httpx.AsyncClient(transport=self._transport) as http:
                response = await http.request(method, url, headers=headers, content=body)
        except httpx.TransportError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        logger.debug("Received response", method=method, url=url, status=response.status_code)
        if response.status_code < 200 or response.status_code >= 300:
            raise StatusError(response.status_code, method=method, url=url)
        return response.content

    async def _send(
        self,
        method: str,
        path: str,
        body: BaseModel | None = None,
    ) -> bytes:
        data = None if body is None else _encode(body)
        return await self._request(method, path, JSON_CONTENT_TYPE, data)


def _encode(body: BaseModel) -> bytes:
    return body.model_dump_json(exclude_none=True).encode()


def _decode(type_: type[T], data: bytes) -> T:
    try:
        return TypeAdapter(type_).validate_json(data)
    except ValidationError as e:
        raise DecodeError(str(e)) from e


def _path(*segments: str) -> str:
    """Join path segments, quoting each one and dropping empty ones."""
    return "/".join(quote(segment.strip("/")) for segment in segments if segment.strip("/"))
