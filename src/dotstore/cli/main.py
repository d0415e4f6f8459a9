from pathlib import Path
from typing import Optional

import typer

from .factories import configure_logging
from .rendering import CliRenderer
from .commands.documents import (
    get_command,
    keys_command,
    set_command,
    unset_command,
)

app = typer.Typer(
    name="dotstore",
    help="Read and write nested values in persistent documents.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug output."
    ),
    storage_dir: Optional[Path] = typer.Option(
        None, "--dir", help="Storage directory, overriding the project configuration."
    ),
):
    configure_logging(verbose)
    ctx.obj = {"renderer": CliRenderer(verbose=verbose), "storage_dir": storage_dir}


app.command(name="get", help="Print the value at a dotted path.")(get_command)
app.command(name="set", help="Store a value at a dotted path.")(set_command)
app.command(name="unset", help="Remove the value at a dotted path.")(unset_command)
app.command(name="keys", help="List the top-level keys of a document.")(keys_command)


if __name__ == "__main__":
    app()
