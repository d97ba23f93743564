r"""
Command-line interface for load-report.

    load-report render results/run.json
    load-report render results/run.json -o csv --out requests.csv
    load-report render results/run.json -t templates/short.j2
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from load_report.config import OUTPUT_MODES, default_log_level, default_output
from load_report.errors import ReportError
from load_report.logging_config import setup_logging
from load_report.reporting import ReportRenderer, exporter_for
from load_report.types import Report

__all__ = ["app", "main"]

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="load-report",
    help="Render load-test results as a summary, CSV, or custom template.",
    no_args_is_help=True,
)


def _load_report(path: Path) -> Report:
    """Load a report saved as JSON, exiting with status 1 on failure."""
    if not path.exists():
        typer.echo(f"File not found: {path}", err=True)
        raise typer.Exit(1)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        typer.echo(f"Invalid JSON in {path}: {e}", err=True)
        raise typer.Exit(1)

    if not isinstance(data, dict):
        typer.echo(f"Expected a JSON object in {path}", err=True)
        raise typer.Exit(1)

    try:
        return Report.from_dict(data)
    except (ReportError, KeyError, TypeError, ValueError) as e:
        typer.echo(f"Invalid report in {path}: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def render(
    report_path: Annotated[Path, typer.Argument(help="Path to report JSON file")],
    output: Annotated[
        str | None,
        typer.Option("-o", "--output", help="Output mode: '' (summary), 'csv', or a template body"),
    ] = None,
    template_file: Annotated[
        Path | None, typer.Option("-t", "--template-file", help="Read a custom template body from file")
    ] = None,
    out: Annotated[Path | None, typer.Option("--out", help="Write to file instead of stdout")] = None,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Verbose output")] = False,
    log_file: Annotated[Path | None, typer.Option("--log-file", help="Also write log records to this file")] = None,
) -> None:
    """Render a report."""
    setup_logging("DEBUG" if verbose else default_log_level(), log_file=str(log_file) if log_file else None)

    if template_file is not None:
        if not template_file.exists():
            typer.echo(f"Template not found: {template_file}", err=True)
            raise typer.Exit(1)
        output = template_file.read_text(encoding="utf-8")
        if not output:
            typer.echo(f"Template is empty: {template_file}", err=True)
            raise typer.Exit(1)
    elif output is None:
        output = default_output()

    report = _load_report(report_path)
    logger.info("Loaded report with %d requests from %s", report.num_requests, report_path)

    exporter = exporter_for(output)
    try:
        if out is not None:
            exporter.export(report, out)
            typer.echo(f"Wrote report: {out}", err=True)
        else:
            typer.echo(exporter.to_string(report))
    except ReportError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def validate(
    report_path: Annotated[Path, typer.Argument(help="Path to report JSON file")],
) -> None:
    """Check a report file before rendering."""
    report = _load_report(report_path)
    try:
        report.validate()
    except ReportError as e:
        typer.echo(f"Invalid report: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Requests: {report.num_requests}")
    typer.echo(f"Responses: {report.num_responses}")
    typer.echo(f"Errors: {sum(report.error_dist.values())}")
    typer.echo("OK")


@app.command()
def modes() -> None:
    """List built-in output modes and template helpers."""
    typer.echo("Output modes:")
    for name, description in OUTPUT_MODES.items():
        typer.echo(f"  {name or '(empty)'}: {description}")
    typer.echo("  <any other text>: used as a Jinja2 template body")

    typer.echo("\nTemplate helpers:")
    for helper in ReportRenderer().helpers:
        typer.echo(f"  - {helper}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
