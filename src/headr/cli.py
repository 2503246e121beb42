"""CLI implementation for headr."""

import sys
from typing import Optional

import typer

from . import __version__
from .core.model import InvalidCountError, SourceReadError
from .core.options import resolve_config
from .core.runner import run

app = typer.Typer(add_completion=False, help="Print the first lines or bytes of each FILE.")

LINES_HINT = "'-n' / '--lines'"
BYTES_HINT = "'-c' / '--bytes'"


def _version_callback(value: bool):
    if value:
        typer.echo(f"headr {__version__}")
        raise typer.Exit()


@app.command()
def main(
    files: list[str] = typer.Argument(None, metavar="[FILE]...", help="Input file(s), or '-' for stdin [default: -]"),
    lines: Optional[str] = typer.Option(None, "-n", "--lines", metavar="LINES", help="Number of lines to print [default: 10]"),
    bytes: Optional[str] = typer.Option(None, "-c", "--bytes", metavar="BYTES", help="Number of bytes to print"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
):
    """Print the first 10 lines of each FILE, or of standard input."""
    if lines is not None and bytes is not None:
        raise typer.BadParameter(f"cannot be used with {LINES_HINT}", param_hint=BYTES_HINT)

    try:
        config = resolve_config(files, lines=lines, bytes_=bytes)
    except InvalidCountError as e:
        # message is the rejected text itself
        raise typer.BadParameter(str(e), param_hint=BYTES_HINT if bytes is not None else LINES_HINT)

    try:
        run(config, sys.stdout.buffer, sys.stderr)
    except SourceReadError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
