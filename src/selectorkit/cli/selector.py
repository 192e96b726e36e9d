"""CLI commands: selectorkit selector / combine -- render CSS selectors."""

from __future__ import annotations

import sys

import click

from selectorkit.selector import SelectorBuilder, css_selector_builder


@click.command()
@click.option("--element", "element", default=None, help="Element (type) name")
@click.option("--id", "id_", default=None, help="Element id")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute condition (repeatable)")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)"
)
@click.option("--pseudo-element", default=None, help="Pseudo-element")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector and print it.

    Parts are emitted in CSS order: element, id, classes, attributes,
    pseudo-classes, pseudo-element.
    """
    builder = SelectorBuilder()
    if element:
        builder.element(element)
    if id_:
        builder.id(id_)
    for value in classes:
        builder.class_(value)
    for value in attrs:
        builder.attr(value)
    for value in pseudo_classes:
        builder.pseudo_class(value)
    if pseudo_element:
        builder.pseudo_element(pseudo_element)

    text = builder.render()
    if text is None:
        click.echo("Error: at least one selector part is required", err=True)
        sys.exit(1)
    click.echo(text)


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two element selectors with a combinator and print the result."""
    text = css_selector_builder.combine(
        css_selector_builder.element(left),
        combinator,
        css_selector_builder.element(right),
    ).render()
    click.echo(text)
