"""CLI entry point for forcelayout."""

import json
import logging
import sys

import click

from forcelayout.config import ITERATIONS, LayoutConfig
from forcelayout.context import DiagramContext, dump_layout, parse_json
from forcelayout.layout import ForceDirectedLayout


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--link-length", "-k", "link_length", type=float, default=None, help="Optimal link length override")
@click.option("--iterations", "-n", "iterations", type=click.IntRange(min=1), default=ITERATIONS, help="Cooling iterations")
@click.option("--indent", "-i", "indent", type=int, default=2, help="JSON indentation of the output")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log layout progress to stderr")
def main(
    input: str | None,
    link_length: float | None,
    iterations: int,
    indent: int,
    output: str | None,
    verbose: bool,
) -> None:
    """Force-directed layout of a JSON node/link diagram."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

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
        diagram = parse_json(text)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    config = LayoutConfig(iterations=iterations, optimal_link_length=link_length)
    ForceDirectedLayout(config).layout(DiagramContext(diagram))
    rendered = json.dumps(dump_layout(diagram), indent=indent) + "\n"

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
