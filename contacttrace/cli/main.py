"""contacttrace CLI entry point - assembles all commands."""
import click

from . import __version__
from .graph_cmd import export, nodes, status
from .query_cmd import query, spread


@click.group()
@click.version_option(version=__version__)
def cli():
    """contacttrace: who could have infected whom, and when."""
    pass


cli.add_command(query)
cli.add_command(spread)
cli.add_command(status)
cli.add_command(nodes)
cli.add_command(export)


if __name__ == "__main__":
    cli()
