from __future__ import annotations

from typing import Mapping

import httpx

from .config import ClientConfig
from .contents import Contents
from .kernels import Kernels, KernelSpecs
from .server import Server
from .sessions import Sessions
from .terminals import Terminals


class Client(Server, Contents, Sessions, KernelSpecs, Kernels, Terminals):
    """Client for the REST API of a Jupyter server.

    Example:
        >>> client = Client.from_env(token="secret")
        >>> version = await client.get_version()
        >>> kernel = await client.create_kernel()
        >>> await client.delete_kernel(kernel.id)
    """

    @classmethod
    def from_env(
        cls,
        token: str | None = None,
        url: str | None = None,
        environ: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Client:
        config = ClientConfig.from_env(token=token, url=url, environ=environ)
        return cls(config, transport=transport)
