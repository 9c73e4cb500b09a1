"""
Project commands for the tokenwright CLI.

Commands that operate on tokenspec.yaml in a project directory:
- init: Scaffold a default tokenspec.yaml
- validate: Check palettes, mappings and modifiers
- generate: Generate tokens and export them
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from tokenwright.core.errors import TokenwrightError
from tokenwright.core.exporters import ExportFormat, export_to_file, export_tokens
from tokenwright.core.ir.tokenspec import TokenSpecYAML
from tokenwright.core.tokenspec_loader import (
    generate_from_tokenspec,
    get_tokenspec_path,
    load_tokenspec,
    scaffold_tokenspec,
    validate_tokenspec,
)

console = Console()
err_console = Console(stderr=True)

ProjectOption = Annotated[
    Path,
    typer.Option(
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
]


def _load_or_exit(project_dir: Path) -> TokenSpecYAML:
    try:
        return load_tokenspec(project_dir.resolve(), use_defaults=False)
    except TokenwrightError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from None


def init_command(
    project_dir: ProjectOption = Path("."),
    product_name: Annotated[
        str, typer.Option("--name", "-n", help="Product name stored in meta")
    ] = "My App",
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing tokenspec.yaml")
    ] = False,
) -> None:
    """
    Create a default tokenspec.yaml.

    The default maps the Success, Warning and Danger sample palettes onto
    a feedback group.

    Examples:
        tokenwright init
        tokenwright init --force
    """
    project_path = project_dir.resolve()
    path = scaffold_tokenspec(project_path, product_name=product_name, overwrite=force)
    if path is None:
        existing = get_tokenspec_path(project_path)
        err_console.print(
            f"[yellow]{escape(str(existing))} already exists.[/yellow] Use --force to overwrite."
        )
        raise typer.Exit(code=1)
    console.print(f"[green]Created[/green] {path}")


def validate_command(project_dir: ProjectOption = Path(".")) -> None:
    """
    Validate tokenspec.yaml.

    Exits with code 1 when errors are found; warnings alone pass.
    """
    tokenspec = _load_or_exit(project_dir)
    result = validate_tokenspec(tokenspec)

    for error in result.errors:
        console.print(f"[red]ERROR[/red] {escape(error)}")
    for warning in result.warnings:
        console.print(f"[yellow]WARNING[/yellow] {escape(warning)}")

    if not result.is_valid:
        summary = f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
        console.print(f"[red]{summary}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]OK[/green] ({len(result.warnings)} warning(s))")


def generate_command(
    project_dir: ProjectOption = Path("."),
    fmt: Annotated[
        ExportFormat, typer.Option("--format", "-F", help="Export format")
    ] = ExportFormat.CSS,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output file (default: stdout)")
    ] = None,
) -> None:
    """
    Generate semantic tokens and export them.

    Contrast warnings are reported on stderr so stdout stays clean for
    piping.

    Examples:
        tokenwright generate                       # CSS to stdout
        tokenwright generate -F dtcg -o tokens.json
    """
    tokenspec = _load_or_exit(project_dir)

    validation = validate_tokenspec(tokenspec)
    if not validation.is_valid:
        for error in validation.errors:
            err_console.print(f"[red]ERROR[/red] {escape(error)}")
        raise typer.Exit(code=1)

    result = generate_from_tokenspec(tokenspec)

    for w in result.warnings:
        err_console.print(
            f"[yellow]Contrast {w.contrast_ratio:.2f}:1[/yellow] "
            f"{escape(w.bg_token)} ({w.bg_color}) / {escape(w.text_token)} ({w.text_color})"
        )

    foundations = [f.value for f in tokenspec.foundations]
    try:
        if output:
            path = export_to_file(result.tokens, fmt, output, tokenspec.naming, foundations)
            err_console.print(f"[green]Wrote[/green] {len(result.tokens)} tokens to {path}")
        else:
            typer.echo(export_tokens(result.tokens, fmt, tokenspec.naming, foundations))
    except TokenwrightError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from None
