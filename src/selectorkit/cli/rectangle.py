"""CLI command: selectorkit rectangle -- print a rectangle as JSON."""

from __future__ import annotations

from dataclasses import replace

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.serialization import to_json_text
from selectorkit.shapes import rectangle as make_rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--indent", default=None, type=int, help="Indent the JSON output")
@click.pass_obj
def rectangle(
    config: SelectorKitConfig | None, width: float, height: float, indent: int | None
) -> None:
    """Print a WIDTH x HEIGHT rectangle and its area as JSON."""
    config = replace(config or SelectorKitConfig(), json_indent=indent)
    rect = make_rectangle(width, height)
    payload = {"width": rect.width, "height": rect.height, "area": rect.area()}
    click.echo(to_json_text(payload, indent=config.json_indent))
