r"""
Number formatting helpers used by report templates.

Durations arrive in seconds. Rounding follows Python's float formatting,
so exact halves round to even (1234.5 -> "1234").

    from load_report.reporting.numbers import format_number_to_millis

    format_number_to_millis(0.0123)  # '  12'
"""

__all__ = [
    "format_number",
    "format_number_int",
    "format_number_int_to_millis",
    "format_number_to_millis",
]


def format_number(duration: float) -> str:
    """Seconds with four decimals."""
    return f"{duration:4.4f}"


def format_number_to_millis(duration: float) -> str:
    """Seconds as whole milliseconds, right aligned to a width of 4."""
    return f"{duration * 1000:4.0f}"


def format_number_int(value: int) -> str:
    return f"{value:d}"


def format_number_int_to_millis(value: int) -> str:
    """Whole seconds as milliseconds.

    Only meaningful for integer fields that hold seconds.
    """
    return f"{value * 1000:d}"
