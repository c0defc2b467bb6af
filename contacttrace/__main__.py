"""
Entry point for running contacttrace as a module.

Usage:
    python -m contacttrace [command] [options]

Example:
    python -m contacttrace query events.txt --source 1 --target 3 -x 4 -y 8
    python -m contacttrace status events.txt
"""

from contacttrace.cli.main import cli

if __name__ == "__main__":
    cli()
