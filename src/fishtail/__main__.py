"""CLI entry point for fishtail."""

import json
import logging
import sys

import click

from fishtail.analysis import find_simple_cycles
from fishtail.ir.graph import GraphIR
from fishtail.parsers import UnsupportedDiagramError, parse
from fishtail.viewer import build_viewer_data

logger = logging.getLogger(__name__)


def _format_cycles(cycles: list[list[str]]) -> str:
    if not cycles:
        return "No cycles\n"
    return "".join(" → ".join([*cycle, cycle[0]]) + "\n" for cycle in cycles)


@click.command()
@click.argument("input", required=False, type=click.Path(dir_okay=False))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--cycles", "cycles_only", is_flag=True, help="List simple cycles instead of emitting viewer JSON")
@click.option("--indent", "indent", type=int, default=None, help="Indent the JSON output by this many spaces")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Enable debug logging")
def main(input: str | None, output: str | None, cycles_only: bool, indent: int | None, verbose: bool) -> None:
    """Interactive Mermaid diagram viewer: parse a flowchart into viewer data."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(message)s")

    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError:
            click.echo(f"Error: file not found: {input}", err=True)
            sys.exit(1)
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"Error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        try:
            text = click.get_binary_stream("stdin").read().decode("utf-8")
        except UnicodeDecodeError as e:
            click.echo(f"Error: cannot read stdin: {e}", err=True)
            sys.exit(1)

    try:
        graph = parse(text)
    except UnsupportedDiagramError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    gir = GraphIR.from_graph(graph)
    logger.debug("%d nodes · %d edges", gir.node_count(), gir.edge_count())

    if cycles_only:
        rendered = _format_cycles(find_simple_cycles(graph.edges))
    else:
        rendered = json.dumps(build_viewer_data(graph), indent=indent, ensure_ascii=False) + "\n"

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"Error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
        logger.info("Saved to %s", output)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
