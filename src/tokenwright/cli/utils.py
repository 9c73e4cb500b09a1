"""
Tokenwright CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import os
import platform

import typer

from tokenwright._version import get_version

LOG_LEVEL_ENV = "TOKENWRIGHT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokenwright version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        python = f"{platform.python_implementation()} {platform.python_version()}"
        typer.echo(f"  Python:        {python}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once for a CLI run.

    ``--verbose`` forces DEBUG; otherwise TOKENWRIGHT_LOG_LEVEL is used,
    falling back to WARNING for unknown names.
    """
    level_name = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
    )
