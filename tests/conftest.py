r"""
Shared pytest fixtures for load-report tests.
"""

import pytest

from load_report.types import Bucket, LatencyPercentile, Report


@pytest.fixture
def sample_buckets() -> list[Bucket]:
    """Histogram with a clear peak."""
    return [
        Bucket(mark=0.010, count=1),
        Bucket(mark=0.059, count=10),
        Bucket(mark=0.108, count=5),
        Bucket(mark=0.157, count=0),
        Bucket(mark=0.206, count=2),
    ]


@pytest.fixture
def sample_report(sample_buckets) -> Report:
    """Report for a run of three requests."""
    return Report(
        total=2.0,
        slowest=0.5,
        fastest=0.012,
        average=0.204,
        rps=150.0,
        size_total=3072,
        size_req=1024,
        histogram=sample_buckets,
        latency_distribution=[
            LatencyPercentile(percentage=10, latency=0.012),
            LatencyPercentile(percentage=50, latency=0.1),
            LatencyPercentile(percentage=99, latency=0.5),
        ],
        avg_conn=0.002,
        conn_max=0.003,
        conn_min=0.001,
        avg_dns=0.0005,
        dns_max=0.001,
        dns_min=0.0,
        avg_req=0.0002,
        req_max=0.0003,
        req_min=0.0001,
        avg_delay=0.183,
        delay_max=0.45,
        delay_min=0.01,
        avg_res=0.015,
        res_max=0.04,
        res_min=0.001,
        status_code_dist={200: 2, 404: 1},
        error_dist={},
        lats=[0.012, 0.1, 0.5],
        conn_lats=[0.001, 0.002, 0.003],
        dns_lats=[0.0005, 0.001, 0.0],
        req_lats=[0.0001, 0.0002, 0.0003],
        delay_lats=[0.01, 0.09, 0.45],
        res_lats=[0.001, 0.005, 0.04],
        status_codes=[200, 200, 404],
        offsets=[0.0, 0.25, 1.5],
    )


@pytest.fixture
def empty_report() -> Report:
    """Report with no recorded requests."""
    return Report()
