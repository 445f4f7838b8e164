"""Fonts command - font catalog utilities."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from hersheytext.config import Config
from hersheytext.exceptions import FontParseError
from hersheytext.fonts import FontCatalog, read_svg_font

console = Console()


def _catalog(ctx: click.Context) -> FontCatalog:
    config = (ctx.obj or {}).get("config") or Config.load()
    return FontCatalog.default(config)


@click.group()
def fonts() -> None:
    """Font catalog commands."""
    pass


@fonts.command("list")
@click.option("--kind", type=click.Choice(["hershey", "svg"]), help="Only list fonts of this kind")
@click.pass_context
def list_fonts(ctx: click.Context, kind: str | None) -> None:
    """List available fonts."""
    catalog = _catalog(ctx)

    table = Table(title="Available Fonts")
    table.add_column("Id", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Kind", style="yellow")
    table.add_column("Glyphs", style="dim", justify="right")

    count = 0
    for font_id in catalog.list_font_ids():
        font = catalog.get_font(font_id)
        if font is None or (kind and font.kind != kind):
            continue
        table.add_row(font_id, font.name, font.kind, str(len(font)))
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} fonts")


@fonts.command("show")
@click.argument("font_id")
@click.pass_context
def show_font(ctx: click.Context, font_id: str) -> None:
    """Show the glyphs of a font."""
    catalog = _catalog(ctx)
    font = catalog.get_font(font_id)
    if font is None:
        console.print(f"[red]Unknown font:[/red] {font_id}")
        raise SystemExit(1)

    table = Table(title=f"{font.name} ({font.kind})")
    table.add_column("Char", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Width", style="yellow", justify="right")
    table.add_column("Path", style="dim")

    for char in font.characters():
        glyph = font.glyph(char)
        if glyph is None:
            continue
        d = glyph.d or ""
        table.add_row(repr(char), glyph.name, f"{glyph.width:g}", d[:40] + "..." if len(d) > 40 else d)

    console.print(table)


@fonts.command("inspect")
@click.argument("svg_font", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect_font(svg_font: Path) -> None:
    """Parse an SVG font file and report its catalog id."""
    try:
        font = read_svg_font(svg_font)
    except FontParseError as e:
        console.print(f"[red]Not a usable SVG font:[/red] {e}")
        raise SystemExit(1) from e

    console.print(f"[green]Id:[/green] {font.font_id}")
    console.print(f"[bold]Family:[/bold] {font.name}")
    console.print(f"[bold]Units per em:[/bold] {font.units_per_em:g}")
    console.print(f"[bold]Glyphs:[/bold] {len(font)}")
