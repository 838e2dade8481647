"""CLI entry point for odata-erd."""

import logging
import sys

import click

from odata_erd.codec import result_to_json, topology_from_json
from odata_erd.config import DEFAULT_NODE_HEIGHT, DEFAULT_NODE_WIDTH, LayoutConfig
from odata_erd.layout.engine import compute_layout
from odata_erd.types import TieBreak

_TIE_BREAK_MAP: dict[str, TieBreak] = {
    "horizontal": TieBreak.Horizontal,
    "vertical": TieBreak.Vertical,
}


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--default-width", "-W", "default_width", type=float, default=DEFAULT_NODE_WIDTH, help="Width used for nodes without one")
@click.option("--default-height", "-H", "default_height", type=float, default=DEFAULT_NODE_HEIGHT, help="Height used for nodes without one")
@click.option(
    "--tie-break",
    "tie_break",
    type=click.Choice(sorted(_TIE_BREAK_MAP), case_sensitive=False),
    default="horizontal",
    help="Axis that wins when |dx| == |dy|",
)
@click.option("--indent", "-i", "indent", type=int, default=2, help="JSON indentation (0 for compact)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log skipped edges and degenerate nodes")
def main(
    input: str | None,
    default_width: float,
    default_height: float,
    tie_break: str,
    indent: int,
    output: str | None,
    verbose: bool,
) -> None:
    """Assign ER diagram connection points for a JSON node/edge topology."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        config = LayoutConfig(
            default_width=default_width,
            default_height=default_height,
            tie_break=_TIE_BREAK_MAP[tie_break.lower()],
        )
        nodes, edges = topology_from_json(text)
        result = compute_layout(nodes, edges, config)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    rendered = result_to_json(result, indent=indent or None) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
