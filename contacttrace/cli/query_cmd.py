"""Query commands: query, spread."""
import sys
import time

import click

from contacttrace.core.receipt import StopRule

from .output import error_box, print_json, receipts_to_stderr, success_box, table


@click.command()
@click.argument('events', type=click.Path(exists=True, dir_okay=False))
@click.option('--source', 'source_id', required=True, type=int, help='Entity infected at time x')
@click.option('--target', 'target_id', required=True, type=int, help='Entity tested for infection')
@click.option('-x', 'x', required=True, type=int, help='Infection time of the source')
@click.option('-y', 'y', required=True, type=int, help='Deadline for the target')
@click.option('--json', 'as_json', is_flag=True, help='Print the path as JSON')
def query(events: str, source_id: int, target_id: int, x: int, y: int, as_json: bool):
    """Find an infection path from SOURCE at time X to TARGET by time Y."""
    t0 = time.perf_counter()
    try:
        from contacttrace.graph.ingest import graph_from_file
        from contacttrace.graph.query import infection_path

        with receipts_to_stderr(as_json):
            graph = graph_from_file(events)
            path = infection_path(graph, source_id, target_id, x, y)
        elapsed_ms = (time.perf_counter() - t0) * 1000

        if as_json:
            print_json({
                "source_id": source_id,
                "target_id": target_id,
                "x": x,
                "y": y,
                "path": [[n.entity_id, n.timestamp] for n in path] if path else None,
            })
        elif path is None:
            error_box("No Infection Path",
                      f"C{target_id} cannot be infected by t={y} from C{source_id} at t={x}")
        else:
            success_box("Infection Path", [
                ("Source", f"C{source_id} at t={x}"),
                ("Target", f"C{target_id} by t={y}"),
                ("Hops", str(len(path) - 1)),
                ("Duration", f"{elapsed_ms:.1f}ms"),
            ], f"contacttrace spread {events} --source {source_id} -x {x} -y {y}")
            table(["#", "Entity", "Timestamp"],
                  [[str(i), str(n.entity_id), str(n.timestamp)] for i, n in enumerate(path)])

        if path is None:
            sys.exit(1)

    except StopRule as e:
        error_box("Query Error", str(e))
        sys.exit(1)
    except (OSError, ValueError) as e:
        error_box("Query: ERROR", str(e))
        sys.exit(2)


@click.command()
@click.argument('events', type=click.Path(exists=True, dir_okay=False))
@click.option('--source', 'source_id', required=True, type=int, help='Entity infected at time x')
@click.option('-x', 'x', required=True, type=int, help='Infection time of the source')
@click.option('-y', 'y', required=True, type=int, help='Time horizon')
def spread(events: str, source_id: int, x: int, y: int):
    """List every entity SOURCE infected at time X can reach by time Y."""
    try:
        from contacttrace.graph.ingest import graph_from_file
        from contacttrace.graph.query import reachable_entities

        graph = graph_from_file(events)
        reached = sorted(reachable_entities(graph, source_id, x, y))

        success_box("Infection Spread", [
            ("Source", f"C{source_id} at t={x}"),
            ("Horizon", f"t={y}"),
            ("Entities Reached", str(len(reached))),
            ("Entities", ", ".join(str(e) for e in reached[:20]) or "none"),
        ])

    except StopRule as e:
        error_box("Spread Error", str(e))
        sys.exit(1)
    except (OSError, ValueError) as e:
        error_box("Spread: ERROR", str(e))
        sys.exit(2)
