import json
from typing import Any

import typer


class CliRenderer:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str = "info"):
        if level == "debug" and not self.verbose:
            return

        color = None
        err = False
        if level == "success":
            color = typer.colors.GREEN
        elif level == "warning":
            color = typer.colors.YELLOW
            err = True
        elif level == "error":
            color = typer.colors.RED
            err = True
        elif level == "debug":
            color = typer.colors.BRIGHT_BLACK

        typer.secho(message, fg=color, err=err)

    def render_value(self, value: Any):
        typer.echo(json.dumps(value, ensure_ascii=False, sort_keys=True))
