"""contacttrace performance benchmarks.

Run all benchmarks:
    pytest benchmarks/bench_contact_graph.py --benchmark-only

Generate JSON report:
    pytest benchmarks/bench_contact_graph.py --benchmark-only --benchmark-json=results.json
"""
