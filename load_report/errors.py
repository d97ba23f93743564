r"""
Exceptions raised while rendering load-test reports.

    from load_report.errors import ReportError, TemplateCompileError
"""

__all__ = [
    "ReportError",
    "TemplateCompileError",
    "TemplateRenderError",
    "PreconditionError",
]


class ReportError(Exception):
    """Base class for report rendering errors."""


class TemplateCompileError(ReportError):
    """Template body could not be parsed."""


class TemplateRenderError(ReportError):
    """Template failed while being evaluated against a report."""


class PreconditionError(ReportError, ValueError):
    """Report data violates the invariants rendering relies on."""
