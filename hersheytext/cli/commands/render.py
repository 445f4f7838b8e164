"""Render command - text to SVG or glyph records."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console

from hersheytext import HersheyText
from hersheytext.config import Config

console = Console(stderr=True)


@click.command()
@click.argument("text")
@click.option("--font", "-f", help="Font id (default from config)")
@click.option("--id", "element_id", default="hersheytext", show_default=True, help="Id of the outer SVG group")
@click.option("--x", type=float, default=0.0, show_default=True, help="Horizontal position")
@click.option("--y", type=float, default=0.0, show_default=True, help="Vertical position")
@click.option("--scale", type=float, default=1.0, show_default=True, help="Scale factor")
@click.option("--spacing", type=float, default=0.0, show_default=True, help="Extra advance per character")
@click.option("--line-height", type=float, default=0.0, show_default=True, help="Extra height per line")
@click.option("--from-right", is_flag=True, help="Lay text out right-to-left")
@click.option("--canvas-width", type=float, help="Canvas width, required with --from-right")
@click.option("--wrap-width", type=float, help="Wrap lines longer than this")
@click.option("--center-width", type=float, help="Center each line within this width")
@click.option("--center-height", type=float, help="Center the block within this height")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["svg", "json"]),
    default="svg",
    show_default=True,
    help="SVG group markup or JSON glyph records",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write to file instead of stdout")
@click.pass_context
def render(
    ctx: click.Context,
    text: str,
    font: str | None,
    element_id: str,
    x: float,
    y: float,
    scale: float,
    spacing: float,
    line_height: float,
    from_right: bool,
    canvas_width: float | None,
    wrap_width: float | None,
    center_width: float | None,
    center_height: float | None,
    output_format: str,
    output: Path | None,
) -> None:
    """Render TEXT with a stroke font.

    \b
    Examples:
      hersheytext render "Hello" --font futural --x 10 --y 20
      hersheytext render "Hi" --format json
    """
    config = (ctx.obj or {}).get("config") or Config.load()
    ht = HersheyText(config=config)

    options: dict[str, object] = {
        "id": element_id,
        "pos": {"x": x, "y": y},
        "scale": scale,
        "spacing": spacing,
        "lineHeight": line_height,
        "fromRight": from_right,
        "wrapWidth": wrap_width,
        "centerWidth": center_width,
        "centerHeight": center_height,
    }
    if font:
        options["font"] = font
    if canvas_width is not None:
        options["canvasSize"] = {"w": canvas_width, "h": 0}

    if output_format == "json":
        records = ht.render_array(text, options)
        result = None if records is None else json.dumps([r.to_dict() for r in records], indent=2)
    else:
        result = ht.render_svg(text, options)

    if result is None:
        console.print("[red]Error:[/red] rendering failed (run with --log-level DEBUG for details)")
        raise SystemExit(1)

    if output:
        output.write_text(result + "\n", encoding="utf-8")
        console.print(f"[green]Written:[/green] {output}")
    else:
        click.echo(result)
