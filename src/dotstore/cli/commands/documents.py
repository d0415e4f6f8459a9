import json
from typing import Any

import typer

from dotstore.exceptions import StoreError
from dotstore.cli.factories import make_registry
from dotstore.cli.rendering import CliRenderer


def _renderer(ctx: typer.Context) -> CliRenderer:
    return ctx.obj["renderer"]


def _fail(ctx: typer.Context, error: Exception):
    _renderer(ctx).render(str(error), "error")
    raise typer.Exit(code=1)


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _open(ctx: typer.Context, document: str):
    registry = make_registry(ctx.obj.get("storage_dir"))
    adapter = registry(document)
    if not adapter.is_loaded:
        _renderer(ctx).render(f"Could not load document '{document}'.", "error")
        raise typer.Exit(code=1)
    return adapter


def get_command(
    ctx: typer.Context,
    document: str = typer.Argument(..., help="Logical document name."),
    path: str = typer.Argument(..., help="Dotted path, e.g. 'window.size.width'."),
):
    adapter = _open(ctx, document)
    try:
        value = adapter.get(path)
    except (StoreError, TypeError) as e:
        _fail(ctx, e)
    _renderer(ctx).render_value(value)


def set_command(
    ctx: typer.Context,
    document: str = typer.Argument(..., help="Logical document name."),
    path: str = typer.Argument(..., help="Dotted path to write."),
    value: str = typer.Argument(..., help="JSON value; anything else is stored as a string."),
    show_previous: bool = typer.Option(
        False, "--show-previous", help="Print the value that was replaced."
    ),
):
    adapter = _open(ctx, document)
    try:
        old_value = adapter.set(path, _parse_value(value))
    except (StoreError, TypeError) as e:
        _fail(ctx, e)
    adapter.save()
    if show_previous:
        _renderer(ctx).render_value(old_value)


def unset_command(
    ctx: typer.Context,
    document: str = typer.Argument(..., help="Logical document name."),
    path: str = typer.Argument(..., help="Dotted path to remove."),
):
    adapter = _open(ctx, document)
    try:
        adapter.delete(path)
    except (StoreError, TypeError) as e:
        _fail(ctx, e)
    adapter.save()


def keys_command(
    ctx: typer.Context,
    document: str = typer.Argument(..., help="Logical document name."),
):
    adapter = _open(ctx, document)
    for key in adapter.keys:
        typer.echo(key)
