r"""
Report rendering.

Turns a finished load-test report into a text summary, a per-request CSV
export, or the output of a custom template.

    from load_report.reporting import render, CsvExporter

    print(render("", report))
    CsvExporter().export(report, "requests.csv")
"""

from load_report.reporting.encoding import jsonify
from load_report.reporting.formats import (
    BaseExporter,
    CsvExporter,
    SummaryExporter,
    TemplateExporter,
    exporter_for,
)
from load_report.reporting.histogram import render_histogram
from load_report.reporting.numbers import (
    format_number,
    format_number_int,
    format_number_int_to_millis,
    format_number_to_millis,
)
from load_report.reporting.renderer import HELPERS, ReportRenderer, render

__all__ = [
    "BaseExporter",
    "CsvExporter",
    "HELPERS",
    "ReportRenderer",
    "SummaryExporter",
    "TemplateExporter",
    "exporter_for",
    "format_number",
    "format_number_int",
    "format_number_int_to_millis",
    "format_number_to_millis",
    "jsonify",
    "render",
    "render_histogram",
]
