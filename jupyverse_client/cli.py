from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

import anyio
import rich_click as click
import structlog
from pydantic import BaseModel, TypeAdapter

from .client import Client
from .config import DEFAULT_URL
from .contents.models import (
    CreateContentsBody,
    GetContentsParams,
    PatchContentsBody,
    PutContentsBody,
)
from .exceptions import JupyverseClientError
from .kernels.models import CreateKernelBody
from .sessions.models import CreateSessionBody, PatchSessionBody
from .terminals.models import CreateTerminalBody


def run(ctx: click.Context, call: Callable[[Client], Awaitable[Any]]) -> None:
    """Build the client, run one API call and print its result as JSON."""
    obj = ctx.ensure_object(dict)
    try:
        client = Client.from_env(
            token=obj.get("token"),
            url=obj.get("url"),
            transport=obj.get("transport"),
        )
        result = anyio.run(call, client)
    except JupyverseClientError as e:
        raise click.ClickException(str(e)) from e
    if result is None:
        return
    if isinstance(result, BaseModel):
        click.echo(result.model_dump_json(indent=2))
    else:
        click.echo(TypeAdapter(type(result)).dump_json(result, indent=2).decode())


@click.group()  # type: ignore
@click.option(
    "--url",
    type=str,
    default=DEFAULT_URL,
    show_default=True,
    help="The server API URL.",
)
@click.option(
    "--token",
    type=str,
    default=None,
    help="The API token (defaults to $JUPYTERLAB_API_TOKEN).",
)
@click.option(
    "--debug",
    is_flag=True,
    show_default=True,
    default=False,
    help="Enable debug logging.",
)
@click.pass_context
def main(ctx: click.Context, url: str, token: str | None, debug: bool) -> None:
    if debug:
        structlog.stdlib.recreate_defaults(log_level=logging.DEBUG)
    else:
        structlog.stdlib.recreate_defaults(log_level=logging.WARNING)
    obj = ctx.ensure_object(dict)
    obj["url"] = url
    obj["token"] = token


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show the server version."""
    run(ctx, lambda client: client.get_version())


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show the server status."""
    run(ctx, lambda client: client.get_status())


@main.command()
@click.pass_context
def me(ctx: click.Context) -> None:
    """Show the current identity and permissions."""
    run(ctx, lambda client: client.get_me())


@main.group()
def contents() -> None:
    """Manage files, notebooks and directories."""


@contents.command("get")
@click.argument("path", default="")
@click.option("--type", "type_", type=str, default=None, help="Content type.")
@click.option("--format", "format_", type=str, default=None, help="Content format.")
@click.option("--no-content", is_flag=True, default=False, help="Only return the model.")
@click.option("--hash", "hash_", is_flag=True, default=False, help="Return the content hash.")
@click.pass_context
def contents_get(
    ctx: click.Context,
    path: str,
    type_: str | None,
    format_: str | None,
    no_content: bool,
    hash_: bool,
) -> None:
    params = GetContentsParams(
        type=type_,
        format=format_,
        content=0 if no_content else 1,
        hash=1 if hash_ else 0,
    )
    run(ctx, lambda client: client.get_contents(path, params))


@contents.command("create")
@click.argument("parent", default="")
@click.option("--ext", type=str, default=None, help="File extension, e.g. .py")
@click.option("--type", "type_", type=str, default=None, help="file, notebook or directory.")
@click.option("--copy-from", type=str, default=None, help="Path of the file to copy.")
@click.pass_context
def contents_create(
    ctx: click.Context,
    parent: str,
    ext: str | None,
    type_: str | None,
    copy_from: str | None,
) -> None:
    body = CreateContentsBody(ext=ext, type=type_, copy_from=copy_from)
    run(ctx, lambda client: client.create_contents(parent, body))


@contents.command("rename")
@click.argument("path")
@click.argument("new_path")
@click.pass_context
def contents_rename(ctx: click.Context, path: str, new_path: str) -> None:
    body = PatchContentsBody(path=new_path)
    run(ctx, lambda client: client.patch_contents(path, body))


@contents.command("put")
@click.argument("path")
@click.option("--content", type=str, default=None, help="The new content.")
@click.option("--format", "format_", type=str, default="text", show_default=True)
@click.option("--type", "type_", type=str, default="file", show_default=True)
@click.pass_context
def contents_put(
    ctx: click.Context,
    path: str,
    content: str | None,
    format_: str,
    type_: str,
) -> None:
    body = PutContentsBody(content=content, format=format_, type=type_)
    run(ctx, lambda client: client.put_contents(path, body))


@contents.command("delete")
@click.argument("path")
@click.pass_context
def contents_delete(ctx: click.Context, path: str) -> None:
    run(ctx, lambda client: client.delete_contents(path))


@main.group()
def sessions() -> None:
    """Manage sessions."""


@sessions.command("list")
@click.pass_context
def sessions_list(ctx: click.Context) -> None:
    run(ctx, lambda client: client.list_sessions())


@sessions.command("get")
@click.argument("session_id")
@click.pass_context
def sessions_get(ctx: click.Context, session_id: str) -> None:
    run(ctx, lambda client: client.get_session(session_id))


@sessions.command("create")
@click.argument("path")
@click.option("--name", type=str, default=None)
@click.option("--type", "type_", type=str, default="notebook", show_default=True)
@click.option("--kernel", type=str, default=None, help="Kernel spec name.")
@click.option("--id", "id_", type=str, default=None, help="Session identifier.")
@click.pass_context
def sessions_create(
    ctx: click.Context,
    path: str,
    name: str | None,
    type_: str,
    kernel: str | None,
    id_: str | None,
) -> None:
    body = CreateSessionBody(
        id=id_,
        kernel=None if kernel is None else {"name": kernel},
        name=name or path,
        path=path,
        type=type_,
    )
    run(ctx, lambda client: client.create_session(body))


@sessions.command("rename")
@click.argument("session_id")
@click.argument("path")
@click.option("--name", type=str, default=None)
@click.pass_context
def sessions_rename(ctx: click.Context, session_id: str, path: str, name: str | None) -> None:
    body = PatchSessionBody(path=path, name=name)
    run(ctx, lambda client: client.patch_session(session_id, body))


@sessions.command("delete")
@click.argument("session_id")
@click.pass_context
def sessions_delete(ctx: click.Context, session_id: str) -> None:
    run(ctx, lambda client: client.delete_session(session_id))


@main.command()
@click.pass_context
def kernelspecs(ctx: click.Context) -> None:
    """List the available kernel specs."""
    run(ctx, lambda client: client.list_kernelspecs())


@main.group()
def kernels() -> None:
    """Manage kernels."""


@kernels.command("list")
@click.pass_context
def kernels_list(ctx: click.Context) -> None:
    run(ctx, lambda client: client.list_kernels())


@kernels.command("start")
@click.option("--name", type=str, default=None, help="Kernel spec name.")
@click.option("--path", type=str, default=None, help="Working directory of the kernel.")
@click.pass_context
def kernels_start(ctx: click.Context, name: str | None, path: str | None) -> None:
    body = CreateKernelBody(name=name, path=path)
    run(ctx, lambda client: client.create_kernel(body))


@kernels.command("get")
@click.argument("kernel_id")
@click.pass_context
def kernels_get(ctx: click.Context, kernel_id: str) -> None:
    run(ctx, lambda client: client.get_kernel(kernel_id))


@kernels.command("interrupt")
@click.argument("kernel_id")
@click.pass_context
def kernels_interrupt(ctx: click.Context, kernel_id: str) -> None:
    run(ctx, lambda client: client.interrupt_kernel(kernel_id))


@kernels.command("restart")
@click.argument("kernel_id")
@click.pass_context
def kernels_restart(ctx: click.Context, kernel_id: str) -> None:
    run(ctx, lambda client: client.restart_kernel(kernel_id))


@kernels.command("shutdown")
@click.argument("kernel_id")
@click.pass_context
def kernels_shutdown(ctx: click.Context, kernel_id: str) -> None:
    run(ctx, lambda client: client.delete_kernel(kernel_id))


@main.group()
def terminals() -> None:
    """Manage terminals."""


@terminals.command("list")
@click.pass_context
def terminals_list(ctx: click.Context) -> None:
    run(ctx, lambda client: client.list_terminals())


@terminals.command("create")
@click.option("--cwd", type=str, default=None, help="Working directory of the terminal.")
@click.pass_context
def terminals_create(ctx: click.Context, cwd: str | None) -> None:
    body = CreateTerminalBody(cwd=cwd)
    run(ctx, lambda client: client.create_terminal(body))


@terminals.command("get")
@click.argument("name")
@click.pass_context
def terminals_get(ctx: click.Context, name: str) -> None:
    run(ctx, lambda client: client.get_terminal(name))


@terminals.command("delete")
@click.argument("name")
@click.pass_context
def terminals_delete(ctx: click.Context, name: str) -> None:
    run(ctx, lambda client: client.delete_terminal(name))
