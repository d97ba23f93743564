r"""
Command-line interface for load-report.

    load-report render results/run.json -o csv
"""

from load_report.cli.main import app, main

__all__ = [
    "app",
    "main",
]
