r"""
Export formats for load-test reports.

    from load_report.reporting.formats import CsvExporter, SummaryExporter

    exporter = CsvExporter()
    exporter.export(report, "requests.csv")
"""

from abc import ABC, abstractmethod
from pathlib import Path

from load_report.reporting.renderer import ReportRenderer
from load_report.types import Report

__all__ = ["BaseExporter", "SummaryExporter", "CsvExporter", "TemplateExporter", "exporter_for"]


class BaseExporter(ABC):
    """Base class for report exporters."""

    def __init__(self, *, renderer: ReportRenderer | None = None) -> None:
        self._renderer = renderer or ReportRenderer()

    @property
    @abstractmethod
    def output(self) -> str:
        """Output mode passed to the renderer."""
        ...

    def export(self, report: Report, path: str | Path) -> None:
        """Export report to file."""
        Path(path).write_text(self.to_string(report), encoding="utf-8")

    def to_string(self, report: Report) -> str:
        """Export report to string."""
        return self._renderer.render(self.output, report)


class SummaryExporter(BaseExporter):
    """Export the human-readable summary."""

    @property
    def output(self) -> str:
        return ""


class CsvExporter(BaseExporter):
    """Export one CSV row per request."""

    @property
    def output(self) -> str:
        return "csv"


class TemplateExporter(BaseExporter):
    """Export with a caller-supplied template body."""

    def __init__(self, template: str, *, renderer: ReportRenderer | None = None) -> None:
        if not template:
            msg = "Template body must not be empty"
            raise ValueError(msg)
        super().__init__(renderer=renderer)
        self._template = template

    @property
    def output(self) -> str:
        return self._template


def exporter_for(output: str, *, renderer: ReportRenderer | None = None) -> BaseExporter:
    """Get the exporter matching an output mode."""
    if output == "":
        return SummaryExporter(renderer=renderer)
    if output == "csv":
        return CsvExporter(renderer=renderer)
    return TemplateExporter(output, renderer=renderer)
