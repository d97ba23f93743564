r"""
Report rendering through Jinja2 templates.

The output mode selects the template body: "" renders the summary, "csv"
renders one row per request, and any other string is used as the template
body itself.

    from load_report.reporting.renderer import render

    print(render("", report))
    print(render("csv", report))
    print(render("{{ format_number(rps) }} req/s", report))
"""

import logging
import threading
from collections import OrderedDict
from collections.abc import Callable, Mapping
from dataclasses import fields
from typing import Any

from jinja2 import Environment, StrictUndefined, Template, TemplateError, TemplateSyntaxError

from load_report.errors import TemplateCompileError, TemplateRenderError
from load_report.reporting.encoding import jsonify
from load_report.reporting.histogram import render_histogram
from load_report.reporting.numbers import (
    format_number,
    format_number_int,
    format_number_int_to_millis,
    format_number_to_millis,
)
from load_report.reporting.templates import CSV_TEMPLATE, DEFAULT_TEMPLATE
from load_report.types import Report

__all__ = ["HELPERS", "TEMPLATE_CACHE_SIZE", "ReportRenderer", "render"]

logger = logging.getLogger(__name__)

# Functions callable by name from inside any template
HELPERS: dict[str, Callable[..., str]] = {
    "format_number": format_number,
    "format_number_to_millis": format_number_to_millis,
    "format_number_int": format_number_int,
    "format_number_int_to_millis": format_number_int_to_millis,
    "render_histogram": render_histogram,
    "jsonify": jsonify,
}

# Compiled templates kept per renderer, least recently used evicted first
TEMPLATE_CACHE_SIZE = 32

_BUILTIN_TEMPLATES = {
    "": DEFAULT_TEMPLATE,
    "csv": CSV_TEMPLATE,
}


class ReportRenderer:
    """Renders reports with the built-in templates or a custom body.

    Compiled templates are cached by body text. The cache holds at most
    ``cache_size`` templates and evicts the least recently used one.
    """

    def __init__(
        self,
        *,
        helpers: Mapping[str, Callable[..., Any]] | None = None,
        cache_size: int = TEMPLATE_CACHE_SIZE,
    ) -> None:
        if cache_size < 1:
            msg = f"cache_size must be at least 1, got {cache_size}"
            raise ValueError(msg)
        self._env = Environment(autoescape=False, undefined=StrictUndefined)
        self._helpers: dict[str, Callable[..., Any]] = {**HELPERS, **(helpers or {})}
        self._env.globals.update(self._helpers)
        self._cache_size = cache_size
        self._templates: OrderedDict[str, Template] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def helpers(self) -> list[str]:
        """Names of the callables registered for templates."""
        return sorted(self._helpers)

    @staticmethod
    def template_for(output: str) -> str:
        """Resolve an output mode to the template body it selects."""
        return _BUILTIN_TEMPLATES.get(output, output)

    def compile(self, output: str) -> Template:
        """Compile the template selected by ``output``.

        Raises:
            TemplateCompileError: If the template body is malformed.
        """
        source = self.template_for(output)
        with self._lock:
            template = self._templates.get(source)
            if template is not None:
                self._templates.move_to_end(source)
        if template is not None:
            logger.debug("Using cached template for output mode %r", _describe(output))
            return template

        try:
            template = self._env.from_string(source)
        except TemplateSyntaxError as e:
            msg = f"Invalid template (line {e.lineno}): {e.message}"
            raise TemplateCompileError(msg) from e

        logger.debug("Compiled template for output mode %r", _describe(output))
        with self._lock:
            self._templates[source] = template
            if len(self._templates) > self._cache_size:
                self._templates.popitem(last=False)
        return template

    def render(self, output: str, report: Report) -> str:
        """Render ``report`` with the template selected by ``output``.

        Args:
            output: "" for the summary, "csv" for CSV, otherwise a template body.
            report: Finished report. It is read, never modified.

        Returns:
            The rendered text.

        Raises:
            TemplateCompileError: If a custom template body is malformed.
            PreconditionError: If the report fails validation.
            TemplateRenderError: If evaluating the template fails.
        """
        template = self.compile(output)
        report.validate()

        context: dict[str, Any] = {f.name: getattr(report, f.name) for f in fields(report)}
        context["report"] = report

        try:
            return template.render(context)
        except (TemplateError, TypeError, ValueError, AttributeError, LookupError) as e:
            msg = f"Failed to render {_describe(output)} template: {e}"
            raise TemplateRenderError(msg) from e


def _describe(output: str) -> str:
    if output == "":
        return "summary"
    if output in _BUILTIN_TEMPLATES:
        return output
    return "custom"


_default_renderer = ReportRenderer()


def render(output: str, report: Report) -> str:
    """Render ``report`` using the shared default renderer."""
    return _default_renderer.render(output, report)
