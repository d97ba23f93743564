r"""
load-report: rendering for HTTP load-test results.

Formats a finished benchmark report as a readable summary with a
response-time histogram, as a per-request CSV export, or through a
custom Jinja2 template.

    from load_report import Report, render

    print(render("", report))
    print(render("csv", report))
"""

from load_report.errors import PreconditionError, ReportError, TemplateCompileError, TemplateRenderError
from load_report.reporting.renderer import ReportRenderer, render
from load_report.types import Bucket, LatencyPercentile, Report

__all__ = [
    "Bucket",
    "LatencyPercentile",
    "PreconditionError",
    "Report",
    "ReportError",
    "ReportRenderer",
    "TemplateCompileError",
    "TemplateRenderError",
    "render",
]

__version__ = "0.1.0"
