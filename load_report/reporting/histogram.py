r"""
ASCII bar chart for response-time histograms.

    from load_report.reporting.histogram import render_histogram
    from load_report.types import Bucket

    print(render_histogram([Bucket(0.010, 3), Bucket(0.020, 12)]))
"""

from collections.abc import Sequence

from load_report.config import BAR_CHAR, BAR_WIDTH
from load_report.types import Bucket

__all__ = ["bar_length", "render_histogram"]


def bar_length(count: int, peak: int, *, width: int = BAR_WIDTH) -> int:
    """Bar length for ``count`` scaled so that ``peak`` fills ``width``.

    Rounds half up using integer arithmetic. Returns 0 when ``peak`` is 0.
    """
    if peak <= 0:
        return 0
    return (count * width + peak // 2) // peak


def render_histogram(buckets: Sequence[Bucket]) -> str:
    """Render buckets as one line each, in the order given.

    Each line reads ``"  <mark> [<count>]\t|<bar>"`` and ends with a newline.
    Buckets are not sorted here.
    """
    peak = max((b.count for b in buckets), default=0)

    lines = []
    for bucket in buckets:
        bar = BAR_CHAR * bar_length(bucket.count, peak)
        lines.append(f"  {bucket.mark:4.3f} [{bucket.count}]\t|{bar}\n")
    return "".join(lines)
