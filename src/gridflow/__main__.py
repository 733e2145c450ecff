"""CLI entry point for gridflow."""

import logging
import sys

import click

from gridflow.config import BOX_BORDER_PADDING, PADDING_BETWEEN_X, PADDING_BETWEEN_Y, RenderConfig
from gridflow.errors import DiagramError
from gridflow.ir.graph import GraphIR
from gridflow.layout.engine import full_layout
from gridflow.parsers import parse
from gridflow.renderers.ascii import AsciiRenderer
from gridflow.types import Direction


@click.command()
@click.argument("input", required=False, type=click.Path(allow_dash=True))
@click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII instead of Unicode")
@click.option(
    "--direction",
    "-d",
    "direction",
    type=click.Choice(["LR", "TD", "TB"], case_sensitive=False),
    default=None,
    help="Override the flow orientation",
)
@click.option("--border-padding", "-p", type=int, default=BOX_BORDER_PADDING, help="Spaces inside node borders")
@click.option("--padding-x", "-x", type=int, default=PADDING_BETWEEN_X, help="Gap between node columns")
@click.option("--padding-y", "-y", type=int, default=PADDING_BETWEEN_Y, help="Gap between node rows")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Log layout decisions to stderr")
def main(
    input: str | None,
    use_ascii: bool,
    direction: str | None,
    border_padding: int,
    padding_x: int,
    padding_y: int,
    output: str | None,
    verbose: bool,
) -> None:
    """Render a flowchart as ASCII/Unicode box drawing."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if input and input != "-":
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        diagram = parse(text)
    except ValueError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    try:
        config = RenderConfig(
            use_ascii=use_ascii,
            border_padding=border_padding,
            padding_x=padding_x,
            padding_y=padding_y,
            direction=Direction.from_str(direction) if direction is not None else None,
        )
        g = full_layout(GraphIR.from_diagram(diagram), config)
        rendered = AsciiRenderer().render(g)
    except (ValueError, DiagramError) as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered + "\n")
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered)


if __name__ == "__main__":
    main()
