"""Graph commands: status, nodes, export."""
import json
import sys

import click

from contacttrace.core.constants import EXPORT_FORMATS
from contacttrace.core.receipt import StopRule

from .output import error_box, receipts_to_stderr, success_box, table


@click.command()
@click.argument('events', type=click.Path(exists=True, dir_okay=False))
def status(events: str):
    """Show entity/node/edge counts for an event file."""
    try:
        from contacttrace.graph.ingest import graph_from_file

        graph = graph_from_file(events)
        stats = graph.stats()
        longest_entity, longest_len = stats["longest_sequence"]

        success_box("Graph Status", [
            ("Events", str(stats["events"])),
            ("Entities", str(stats["entities"])),
            ("Nodes", str(stats["nodes"])),
            ("Edges", str(stats["edges"])),
            ("Busiest Entity", f"C{longest_entity} ({longest_len} nodes)" if longest_len else "none"),
        ], f"contacttrace nodes {events} <entity>")

    except StopRule as e:
        error_box("Graph Status Error", str(e))
        sys.exit(1)
    except (OSError, ValueError) as e:
        error_box("Graph Status: ERROR", str(e))
        sys.exit(2)


@click.command()
@click.argument('events', type=click.Path(exists=True, dir_okay=False))
@click.argument('entity_id', type=int)
def nodes(events: str, entity_id: int):
    """List the time-ordered nodes of one entity."""
    try:
        from contacttrace.graph.ingest import graph_from_file

        graph = graph_from_file(events)
        sequence = graph.get_node_sequence(entity_id)

        if not sequence:
            error_box("Nodes", f"C{entity_id} never communicated")
            sys.exit(1)

        table(["Timestamp", "Out Neighbors"],
              [[str(n.timestamp), " ".join(f"{e}@{t}" for e, t in n.out_neighbors())]
               for n in sequence])

    except StopRule as e:
        error_box("Nodes Error", str(e))
        sys.exit(1)
    except (OSError, ValueError) as e:
        error_box("Nodes: ERROR", str(e))
        sys.exit(2)


@click.command()
@click.argument('events', type=click.Path(exists=True, dir_okay=False))
@click.option('--format', 'output_format', default='dot',
              type=click.Choice(list(EXPORT_FORMATS)),
              help='Output format')
@click.option('--output', '-o', help='Output file path')
def export(events: str, output_format: str, output: str):
    """Export the contact graph for visualization."""
    try:
        from contacttrace.graph.export import to_dict, to_dot
        from contacttrace.graph.ingest import graph_from_file

        with receipts_to_stderr(not output):
            graph = graph_from_file(events)

        if output_format == 'dot':
            content = to_dot(graph)
        else:
            content = json.dumps(to_dict(graph), indent=2)

        if output:
            with open(output, 'w') as f:
                f.write(content)
            click.echo(f"Written to {output}")
        else:
            click.echo(content)

    except StopRule as e:
        error_box("Export Error", str(e))
        sys.exit(1)
    except (OSError, ValueError) as e:
        error_box("Export: ERROR", str(e))
        sys.exit(2)
