import httpx
import pytest
from fake_server import TOKEN, FakeServer

from jupyverse_client import Client, ClientConfig


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture()
def transport(server) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=server.app)


@pytest.fixture()
def client(transport) -> Client:
    config = ClientConfig(token=TOKEN, url="http://testserver/api")
    return Client(config, transport=transport)
