"""
Color inspection commands for the tokenwright CLI.

- scale: Print an 11-stop tonal scale for a seed color
- contrast: WCAG contrast ratio between two colors
- convert: Hex to OKLCH
"""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tokenwright.core.contrast import accessibility_level, contrast_ratio
from tokenwright.core.errors import InvalidColorFormat
from tokenwright.core.oklch import hex_to_oklch, normalize_hex
from tokenwright.core.tonal_scale import generate_tonal_scale

console = Console()
err_console = Console(stderr=True)


def _color_or_exit(value: str) -> str:
    try:
        return normalize_hex(value)
    except InvalidColorFormat as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from None


def _mark(ok: bool) -> str:
    return "[green]pass[/green]" if ok else "[red]fail[/red]"


def scale_command(
    seed: Annotated[str, typer.Argument(help="Seed hex color, e.g. #6610F2")],
    name: Annotated[str, typer.Argument(help="Scale name, e.g. indigo")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """
    Generate a tonal scale from a seed color.

    The seed becomes stop 500; the other stops share its hue.

    Examples:
        tokenwright scale "#6610F2" indigo
        tokenwright scale 4183ca cerulean --json
    """
    seed = _color_or_exit(seed)
    scale = generate_tonal_scale(seed, name)

    if as_json:
        payload = {"name": scale.name, "stops": {str(s.stop): s.hex for s in scale.stops}}
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title=f"Tonal scale: {scale.name}")
    table.add_column("Stop", justify="right")
    table.add_column("Hex")
    table.add_column("Swatch")
    for s in scale.stops:
        table.add_row(str(s.stop), s.hex, f"[on {s.hex}]      [/]")
    console.print(table)


def contrast_command(
    foreground: Annotated[str, typer.Argument(help="Foreground hex color")],
    background: Annotated[str, typer.Argument(help="Background hex color")],
) -> None:
    """
    Show the WCAG contrast ratio between two colors.

    Examples:
        tokenwright contrast "#FFFFFF" "#198754"
    """
    fg = _color_or_exit(foreground)
    bg = _color_or_exit(background)
    ratio = contrast_ratio(fg, bg)
    level = accessibility_level(ratio)

    console.print(f"Contrast ratio: [bold]{ratio:.2f}:1[/bold]")
    console.print(f"  AA normal:  {_mark(level.normal_aa)}")
    console.print(f"  AAA normal: {_mark(level.normal_aaa)}")
    console.print(f"  AA large:   {_mark(level.large_aa)}")
    console.print(f"  AAA large:  {_mark(level.large_aaa)}")


def convert_command(
    color: Annotated[str, typer.Argument(help="Hex color to convert")],
) -> None:
    """
    Convert a hex color to OKLCH.

    Examples:
        tokenwright convert "#6610F2"
    """
    hex_color = _color_or_exit(color)
    lch = hex_to_oklch(hex_color)
    console.print(f"{hex_color} -> oklch({lch.l:.4f} {lch.c:.4f} {lch.h:.2f})")
