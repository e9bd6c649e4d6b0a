from __future__ import annotations

from pathlib import Path
from typing import Any, get_args, get_origin

import anyio
import msgspec
import typer

from . import __version__
from .client import BotApi
from .codec import DecodeError, encode
from .config import ConfigError, load_settings
from .envelope import Failed
from .logging import setup_logging
from .operations import OPERATIONS, Operation, operation, operations_for_wire_name
from .transport import HttpxTransport, TransportError

_CONFIG_PATH_OPTION = typer.Option(
    None,
    "--config",
    help="Path to botwire.toml (defaults to ./.botwire or ~/.botwire).",
)


def _type_name(tp: Any) -> str:
    if tp is None:
        return "-"
    origin = get_origin(tp)
    if origin is list:
        (item,) = get_args(tp)
        return f"list[{_type_name(item)}]"
    if origin is not None:
        return " | ".join(_type_name(arg) for arg in get_args(tp))
    return getattr(tp, "__name__", repr(tp))


def _describe(op: Operation[Any, Any]) -> str:
    return (
        f"{op.name:<40} {op.verb.value:<5} {op.wire_name:<36} "
        f"{_type_name(op.request_type)} -> {_type_name(op.result_type)}"
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def app_main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Typed Telegram Bot API bindings."""


def operations_cmd(
    wire: str | None = typer.Option(
        None,
        "--wire",
        help="Only show bindings for this wire method name.",
    ),
) -> None:
    """List every bound operation."""
    ops = operations_for_wire_name(wire) if wire else list(OPERATIONS.values())
    if not ops:
        typer.echo(f"error: no operation is bound to {wire!r}", err=True)
        raise typer.Exit(code=1)
    for op in ops:
        typer.echo(_describe(op))


def _parse_params(op: Operation[Any, Any], params: str | None) -> Any:
    if op.request_type is None:
        if params:
            raise typer.BadParameter(
                f"{op.name} takes no parameters", param_hint="--params"
            )
        return None
    try:
        body = msgspec.json.decode(params or "{}")
    except msgspec.DecodeError as e:
        raise typer.BadParameter(f"invalid JSON: {e}", param_hint="--params") from e
    if not isinstance(body, dict):
        raise typer.BadParameter("expected a JSON object", param_hint="--params")
    try:
        return op.decode_request(body)
    except DecodeError as e:
        raise typer.BadParameter(str(e), param_hint="--params") from e


async def _invoke(
    op: Operation[Any, Any], request: Any, config_path: Path | None
) -> Any:
    settings = load_settings(config_path)
    transport = HttpxTransport(
        settings.bot_token,
        base_url=settings.api_url,
        timeout_s=settings.timeout_s,
    )
    async with BotApi(transport) as api:
        return await api.call(op, request)


def call_cmd(
    name: str = typer.Argument(..., help="Operation name, e.g. send_message."),
    params: str | None = typer.Option(
        None,
        "--params",
        help="Request fields as a JSON object.",
    ),
    config_path: Path | None = _CONFIG_PATH_OPTION,
    debug: bool = typer.Option(
        False,
        "--debug/--no-debug",
        help="Log requests and responses.",
    ),
) -> None:
    """Invoke one operation and print its result as JSON."""
    setup_logging(debug=debug)
    try:
        op = operation(name)
    except KeyError:
        typer.echo(f"error: unknown operation {name!r}", err=True)
        raise typer.Exit(code=2) from None
    request = _parse_params(op, params)

    try:
        envelope = anyio.run(_invoke, op, request, config_path)
    except ConfigError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2) from e
    except TransportError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2) from e
    except DecodeError as e:
        typer.echo(f"error: unexpected response: {e}", err=True)
        raise typer.Exit(code=2) from e

    if isinstance(envelope, Failed):
        typer.echo(f"error: {envelope.error_code}: {envelope.description}", err=True)
        if envelope.retry_after is not None:
            typer.echo(f"retry after {envelope.retry_after}s", err=True)
        raise typer.Exit(code=1)
    typer.echo(msgspec.json.encode(encode(envelope.result)).decode())


def create_app() -> typer.Typer:
    app = typer.Typer(
        add_completion=False,
        no_args_is_help=True,
        help="Call Telegram Bot API operations from the shell.",
    )
    app.callback()(app_main)
    app.command(name="operations")(operations_cmd)
    app.command(name="call")(call_cmd)
    return app


def main() -> None:
    app = create_app()
    app()


if __name__ == "__main__":
    main()
