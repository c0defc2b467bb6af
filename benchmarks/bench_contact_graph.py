"""Benchmark: contact graph build and query latency.

Target SLOs:
  - Build (~100k events): <2000ms
  - Infection path query: <100ms
"""
import random
import time
from io import StringIO
from unittest.mock import patch

import pytest

from contacttrace.core.constants import BUILD_SLO_MS, QUERY_SLO_MS
from contacttrace.graph.events import EventLog
from contacttrace.graph.query import infection_path


def random_events(count: int, entities: int = 1000, horizon: int = 10000, seed: int = 42) -> list:
    """Generate reproducible random communication events."""
    rng = random.Random(seed)
    return [
        (rng.randrange(entities), rng.randrange(entities), rng.randrange(horizon))
        for _ in range(count)
    ]


def build(events: list):
    log = EventLog()
    log.extend(events)
    return log.freeze()


class TestContactGraphPerformance:
    """Benchmark contact graph operations."""

    @pytest.fixture
    def events(self):
        return random_events(20000)

    @pytest.fixture
    def graph(self, events):
        with patch('sys.stdout', new=StringIO()):
            return build(events)

    def test_build_latency(self, events, benchmark):
        """Building 20k events stays well inside the build SLO."""
        with patch('sys.stdout', new=StringIO()):
            graph = benchmark(build, events)
        assert graph.event_count == 20000

    def test_query_latency(self, graph, benchmark):
        """Worst-case (unreachable) query explores the whole graph."""
        def query():
            return infection_path(graph, 0, -1, 0, 10000)

        with patch('sys.stdout', new=StringIO()):
            result = benchmark(query)
        assert result is None


def manual_benchmark():
    """Manual benchmark for verification."""
    print("\nContact Graph Benchmark")
    print("-" * 50)

    events = random_events(100000)

    with patch('sys.stdout', new=StringIO()):
        start = time.perf_counter()
        graph = build(events)
        build_ms = (time.perf_counter() - start) * 1000
    print(f"  Build 100k events: {build_ms:.1f}ms (SLO <{BUILD_SLO_MS}ms) "
          f"[{'PASS' if build_ms < BUILD_SLO_MS else 'FAIL'}]")

    iterations = 20
    with patch('sys.stdout', new=StringIO()):
        start = time.perf_counter()
        for i in range(iterations):
            infection_path(graph, i, 999 - i, 0, 10000)
        query_ms = (time.perf_counter() - start) / iterations * 1000
    print(f"  Infection query: {query_ms:.1f}ms (SLO <{QUERY_SLO_MS}ms) "
          f"[{'PASS' if query_ms < QUERY_SLO_MS else 'FAIL'}]")

    print("-" * 50)


if __name__ == "__main__":
    manual_benchmark()
