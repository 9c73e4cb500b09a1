"""
Main tokenwright application.

Registers the project and color commands on a single typer app.
"""

from __future__ import annotations

import sys
from typing import Annotated

import typer

from tokenwright.cli.color import contrast_command, convert_command, scale_command
from tokenwright.cli.project import generate_command, init_command, validate_command
from tokenwright.cli.utils import configure_logging, version_callback

app = typer.Typer(
    name="tokenwright",
    help="""tokenwright - semantic color design tokens

Command Types:
  • Project: init, validate, generate
    → Operate on tokenspec.yaml in the project directory

  • Color: scale, contrast, convert
    → Inspect individual colors
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
) -> None:
    """tokenwright CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="init")(init_command)
app.command(name="validate")(validate_command)
app.command(name="generate")(generate_command)
app.command(name="scale")(scale_command)
app.command(name="contrast")(contrast_command)
app.command(name="convert")(convert_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
