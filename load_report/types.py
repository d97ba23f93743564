r"""
Core types for load-test reports.

    from load_report.types import Bucket, Report

    report = Report(total=2.5, rps=400.0, histogram=[Bucket(mark=0.01, count=12)])
    report.validate()
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any

from load_report.errors import PreconditionError

__all__ = [
    "Bucket",
    "LatencyPercentile",
    "Report",
    "PARALLEL_FIELDS",
]

# Per-request sequences; index i of each refers to the same request.
PARALLEL_FIELDS = (
    "lats",
    "conn_lats",
    "dns_lats",
    "req_lats",
    "delay_lats",
    "res_lats",
    "status_codes",
    "offsets",
)


@dataclass(frozen=True, slots=True)
class Bucket:
    """One bin of the response-time histogram.

    Attributes:
        mark: Lower bound of the bin in seconds.
        count: Number of requests that fell into the bin.
    """

    mark: float
    count: int


@dataclass(frozen=True, slots=True)
class LatencyPercentile:
    """One entry of the latency distribution.

    Attributes:
        percentage: Percentile (e.g. 50, 90, 99).
        latency: Latency at that percentile in seconds.
    """

    percentage: int
    latency: float


@dataclass(frozen=True, slots=True)
class Report:
    """Finished measurement set of one benchmark run.

    All durations are in seconds. The per-phase fields hold the average,
    max and min of: connection setup including DNS (``conn``), DNS lookup
    (``dns``), request write (``req``), wait for the first response byte
    (``delay``) and response read (``res``).

    The eight sequences named in ``PARALLEL_FIELDS`` carry one entry per
    recorded request, in recording order.
    """

    total: float = 0.0
    slowest: float = 0.0
    fastest: float = 0.0
    average: float = 0.0
    rps: float = 0.0

    size_total: int = 0
    size_req: int = 0

    histogram: list[Bucket] = field(default_factory=list)
    latency_distribution: list[LatencyPercentile] = field(default_factory=list)

    avg_conn: float = 0.0
    conn_max: float = 0.0
    conn_min: float = 0.0
    avg_dns: float = 0.0
    dns_max: float = 0.0
    dns_min: float = 0.0
    avg_req: float = 0.0
    req_max: float = 0.0
    req_min: float = 0.0
    avg_delay: float = 0.0
    delay_max: float = 0.0
    delay_min: float = 0.0
    avg_res: float = 0.0
    res_max: float = 0.0
    res_min: float = 0.0

    status_code_dist: dict[int, int] = field(default_factory=dict)
    error_dist: dict[str, int] = field(default_factory=dict)

    lats: list[float] = field(default_factory=list)
    conn_lats: list[float] = field(default_factory=list)
    dns_lats: list[float] = field(default_factory=list)
    req_lats: list[float] = field(default_factory=list)
    delay_lats: list[float] = field(default_factory=list)
    res_lats: list[float] = field(default_factory=list)
    status_codes: list[int] = field(default_factory=list)
    offsets: list[float] = field(default_factory=list)

    @property
    def num_requests(self) -> int:
        """Number of requests recorded in the per-request sequences."""
        return len(self.lats)

    @property
    def num_responses(self) -> int:
        """Number of responses counted in the status-code distribution."""
        return sum(self.status_code_dist.values())

    def validate(self) -> None:
        """Check the invariants rendering relies on.

        Raises:
            PreconditionError: If the per-request sequences differ in length
                or any bucket, status-code or error count is negative.
        """
        lengths = {name: len(getattr(self, name)) for name in PARALLEL_FIELDS}
        if len(set(lengths.values())) > 1:
            detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
            msg = f"Per-request sequences differ in length: {detail}"
            raise PreconditionError(msg)

        for bucket in self.histogram:
            if bucket.count < 0:
                msg = f"Histogram bucket at {bucket.mark} has negative count {bucket.count}"
                raise PreconditionError(msg)

        for code, count in self.status_code_dist.items():
            if count < 0:
                msg = f"Status code {code} has negative count {count}"
                raise PreconditionError(msg)

        for message, count in self.error_dist.items():
            if count < 0:
                msg = f"Error '{message}' has negative count {count}"
                raise PreconditionError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Convert the report to plain data suitable for JSON."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Report":
        """Build a report from the output of ``to_dict`` (or its JSON form).

        Raises:
            PreconditionError: If ``data`` holds keys that are not report fields,
                or a sequence or mapping field holds a value of another type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown report fields: {', '.join(unknown)}"
            raise PreconditionError(msg)

        for name in (*PARALLEL_FIELDS, "histogram", "latency_distribution"):
            if name in data and not isinstance(data[name], (list, tuple)):
                msg = f"Report field '{name}' must be a list, got {type(data[name]).__name__}"
                raise PreconditionError(msg)
        for name in ("status_code_dist", "error_dist"):
            if name in data and not isinstance(data[name], dict):
                msg = f"Report field '{name}' must be a mapping, got {type(data[name]).__name__}"
                raise PreconditionError(msg)

        values = dict(data)
        if "histogram" in values:
            values["histogram"] = [
                b if isinstance(b, Bucket) else Bucket(mark=float(b["mark"]), count=int(b["count"]))
                for b in values["histogram"]
            ]
        if "latency_distribution" in values:
            values["latency_distribution"] = [
                p
                if isinstance(p, LatencyPercentile)
                else LatencyPercentile(percentage=int(p["percentage"]), latency=float(p["latency"]))
                for p in values["latency_distribution"]
            ]
        if "status_code_dist" in values:
            # JSON object keys are always strings
            values["status_code_dist"] = {int(k): int(v) for k, v in values["status_code_dist"].items()}
        if "error_dist" in values:
            values["error_dist"] = {str(k): int(v) for k, v in values["error_dist"].items()}
        if "status_codes" in values:
            values["status_codes"] = [int(c) for c in values["status_codes"]]

        return cls(**values)
