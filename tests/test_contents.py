import pytest
from fake_server import FakeServer

from jupyverse_client import (
    CreateContentsBody,
    GetContentsParams,
    PatchContentsBody,
    PutContentsBody,
    StatusError,
)


@pytest.mark.anyio
async def test_get_root_contents(client):
    data = await client.get_contents("")
    assert data.type == "directory"
    assert data.content == []


@pytest.mark.anyio
async def test_get_contents_tree(client):
    await client.put_contents("dir", PutContentsBody(type="directory"))
    await client.put_contents(
        "dir/hello.txt", PutContentsBody(content="hello world", format="text", type="file")
    )
    data = await client.get_contents("dir")
    assert data.type == "directory"
    assert data.name == "dir"
    assert [c.name for c in data.content] == ["hello.txt"]
    child = data.content[0]
    assert child.path == "dir/hello.txt"
    assert child.type == "file"
    assert child.content is None

    root = await client.get_contents()
    assert [c.name for c in root.content] == ["dir"]
    assert root.content[0].type == "directory"


@pytest.mark.anyio
async def test_get_contents_params(client, server: FakeServer):
    await client.put_contents(
        "hello.txt", PutContentsBody(content="hello world", format="text", type="file")
    )
    data = await client.get_contents("hello.txt")
    assert data.content == "hello world"
    assert data.size == 11
    assert data.hash is None
    assert server.requests[-1]["query"] == {}

    data = await client.get_contents("hello.txt", GetContentsParams(content=0, hash=1))
    assert data.content is None
    assert data.hash_algorithm == "sha256"
    assert len(data.hash) == 64
    assert server.requests[-1]["query"] == {"content": "0", "hash": "1"}

    data = await client.get_contents("hello.txt", GetContentsParams(type="file", format="text"))
    assert data.format == "text"
    assert server.requests[-1]["query"] == {"type": "file", "format": "text"}

    with pytest.raises(StatusError) as excinfo:
        await client.get_contents("hello.txt", GetContentsParams(type="directory"))
    assert excinfo.value.status_code == 400


@pytest.mark.anyio
async def test_create_contents(client):
    data = await client.create_contents("", CreateContentsBody(ext=".test.txt"))
    assert data.name.endswith(".test.txt")
    assert data.type == "file"
    # a second file gets a new name
    data2 = await client.create_contents("", CreateContentsBody(ext=".test.txt"))
    assert data2.name.endswith(".test.txt")
    assert data2.name != data.name


@pytest.mark.anyio
async def test_create_contents_types(client):
    notebook = await client.create_contents(body=CreateContentsBody(type="notebook"))
    assert notebook.type == "notebook"
    assert notebook.name.endswith(".ipynb")
    directory = await client.create_contents(body=CreateContentsBody(type="directory"))
    assert directory.type == "directory"
    nested = await client.create_contents(directory.path, CreateContentsBody(ext=".py"))
    assert nested.path == f"{directory.path}/{nested.name}"
    assert nested.name.endswith(".py")


@pytest.mark.anyio
async def test_create_contents_copy(client):
    await client.put_contents(
        "hello.txt", PutContentsBody(content="hello world", format="text", type="file")
    )
    copy = await client.create_contents("", CreateContentsBody(copy_from="hello.txt"))
    assert copy.name != "hello.txt"
    assert copy.name.endswith(".txt")
    data = await client.get_contents(copy.path)
    assert data.content == "hello world"


@pytest.mark.anyio
async def test_create_rename_contents(client):
    created = await client.create_contents("", CreateContentsBody(ext=".test.txt"))
    assert created.name.endswith(".test.txt")

    patched = await client.patch_contents(created.name, PatchContentsBody(path="file.txt"))
    assert patched.name == "file.txt"
    assert patched.path == "file.txt"
    with pytest.raises(StatusError) as excinfo:
        await client.get_contents(created.name)
    assert excinfo.value.status_code == 404


@pytest.mark.anyio
async def test_rename_into_directory(client):
    await client.put_contents("dir", PutContentsBody(type="directory"))
    created = await client.create_contents("", CreateContentsBody(ext=".txt"))
    patched = await client.patch_contents(created.path, PatchContentsBody(path="dir/moved.txt"))
    assert patched.name == "moved.txt"
    assert patched.path == "dir/moved.txt"


@pytest.mark.anyio
async def test_put_contents(client):
    data = await client.put_contents(
        "hello.txt", PutContentsBody(content="hello world", format="text", type="file")
    )
    assert data.name == "hello.txt"
    data = await client.put_contents(
        "hello.txt", PutContentsBody(content="bye", format="text", type="file")
    )
    assert data.name == "hello.txt"
    data = await client.get_contents("hello.txt")
    assert data.content == "bye"


@pytest.mark.anyio
async def test_create_delete_contents(client):
    created = await client.create_contents("", CreateContentsBody(ext=".test.txt"))
    assert created.name.endswith(".test.txt")

    assert await client.delete_contents(created.name) is None
    with pytest.raises(StatusError) as excinfo:
        await client.get_contents(created.name)
    assert excinfo.value.status_code == 404
    with pytest.raises(StatusError):
        await client.delete_contents(created.name)
