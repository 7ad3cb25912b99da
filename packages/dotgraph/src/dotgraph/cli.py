"""CLI entrypoint for dotgraph."""

import logging
import sys

import click

from dotgraph import __version__
from dotgraph.errors import DotGraphError
from dotgraph.formatters import PrettyWriter, prettify
from dotgraph.samples import SAMPLES, build_sample
from dotgraph.tokenizer import TokenKind, iter_tokens

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


@click.group()
@click.version_option(__version__, prog_name="dotgraph")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="DOTGRAPH_LOG_LEVEL",
    show_default=True,
    help="Logging level for diagnostics written to stderr",
)
def cli(log_level: str) -> None:
    """dotgraph - Build and format Graphviz DOT documents."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.argument("name", type=click.Choice(sorted(SAMPLES)), default="cluster")
@click.option("--pretty", is_flag=True, help="Indent the output for humans")
@click.option(
    "--out",
    "out_path",
    type=click.Path(dir_okay=False, writable=True),
    default="-",
    help="Output file (defaults to stdout)",
)
def sample(name: str, pretty: bool, out_path: str) -> None:
    """Write one of the bundled sample graphs."""
    graph = build_sample(name)
    with click.open_file(out_path, "wb") as stream:
        try:
            if pretty:
                writer = PrettyWriter(stream)
                graph.write_to(writer)
                writer.flush()
            else:
                graph.write_to(stream)
                stream.write(b"\n")
        except DotGraphError as exc:
            raise click.ClickException(str(exc)) from exc


@cli.command(name="format")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--out",
    "out_path",
    type=click.Path(dir_okay=False, writable=True),
    default="-",
    help="Output file (defaults to stdout)",
)
def format_command(source, out_path: str) -> None:
    """Pretty-print DOT text from SOURCE (a path or - for stdin)."""
    text = prettify(source.read())
    with click.open_file(out_path, "w", encoding="utf-8") as stream:
        stream.write(text)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def tokens(source) -> None:
    """List the tokens of DOT text from SOURCE."""
    from rich.console import Console
    from rich.table import Table
    from rich.text import Text

    console = Console()
    table = Table(title="Tokens")
    table.add_column("position", justify="right", style="dim")
    table.add_column("kind", style="cyan", no_wrap=True)
    table.add_column("value")

    try:
        for token in iter_tokens(source.read()):
            if token.kind is TokenKind.EOF:
                break
            table.add_row(str(token.position), token.kind.name, Text(token.value))
    except DotGraphError as exc:
        raise click.ClickException(str(exc)) from exc

    console.print(table)


def main() -> None:
    cli()
