r"""
Tests for load_report.types module.
"""

import dataclasses
import json

import pytest

from load_report.errors import PreconditionError
from load_report.types import PARALLEL_FIELDS, Bucket, LatencyPercentile, Report


class TestBucket:
    def test_create_bucket(self):
        bucket = Bucket(mark=0.25, count=3)
        assert bucket.mark == 0.25
        assert bucket.count == 3

    def test_bucket_immutable(self):
        bucket = Bucket(mark=0.25, count=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            bucket.count = 4  # type: ignore


class TestReport:
    def test_defaults(self, empty_report):
        assert empty_report.total == 0.0
        assert empty_report.histogram == []
        assert empty_report.status_code_dist == {}
        assert empty_report.num_requests == 0
        assert empty_report.num_responses == 0

    def test_report_immutable(self, sample_report):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_report.rps = 1.0  # type: ignore

    def test_num_requests(self, sample_report):
        assert sample_report.num_requests == 3

    def test_num_responses(self, sample_report):
        assert sample_report.num_responses == 3

    def test_parallel_fields_are_report_fields(self):
        names = {f.name for f in dataclasses.fields(Report)}
        assert set(PARALLEL_FIELDS) <= names
        assert len(PARALLEL_FIELDS) == 8


class TestValidate:
    def test_valid_report(self, sample_report):
        sample_report.validate()

    def test_empty_report_is_valid(self, empty_report):
        empty_report.validate()

    def test_short_sequence(self, sample_report):
        report = dataclasses.replace(sample_report, offsets=[0.0, 0.25])
        with pytest.raises(PreconditionError, match="differ in length"):
            report.validate()

    def test_long_sequence(self, sample_report):
        report = dataclasses.replace(sample_report, status_codes=[200, 200, 404, 500])
        with pytest.raises(PreconditionError, match="status_codes=4"):
            report.validate()

    def test_negative_bucket_count(self, sample_report):
        report = dataclasses.replace(sample_report, histogram=[Bucket(mark=0.1, count=-1)])
        with pytest.raises(PreconditionError, match="negative count"):
            report.validate()

    def test_negative_status_count(self, sample_report):
        report = dataclasses.replace(sample_report, status_code_dist={200: -2})
        with pytest.raises(PreconditionError, match="Status code 200"):
            report.validate()

    def test_negative_error_count(self, sample_report):
        report = dataclasses.replace(sample_report, error_dist={"timeout": -1})
        with pytest.raises(PreconditionError, match="timeout"):
            report.validate()

    def test_precondition_error_is_value_error(self, sample_report):
        report = dataclasses.replace(sample_report, lats=[])
        with pytest.raises(ValueError):
            report.validate()


class TestSerialization:
    def test_to_dict(self, sample_report):
        data = sample_report.to_dict()

        assert data["rps"] == 150.0
        assert data["histogram"][1] == {"mark": 0.059, "count": 10}
        assert data["latency_distribution"][0] == {"percentage": 10, "latency": 0.012}
        assert data["status_code_dist"] == {200: 2, 404: 1}

    def test_from_json(self, sample_report):
        data = json.loads(json.dumps(sample_report.to_dict()))
        assert Report.from_dict(data) == sample_report

    def test_from_dict_converts_status_keys(self):
        report = Report.from_dict({"status_code_dist": {"200": 5, "503": 1}})
        assert report.status_code_dist == {200: 5, 503: 1}

    def test_from_dict_builds_nested_types(self):
        report = Report.from_dict(
            {
                "histogram": [{"mark": 0.1, "count": 2}],
                "latency_distribution": [{"percentage": 95, "latency": 0.3}],
            }
        )
        assert report.histogram == [Bucket(mark=0.1, count=2)]
        assert report.latency_distribution == [LatencyPercentile(percentage=95, latency=0.3)]

    def test_from_dict_partial(self):
        report = Report.from_dict({"total": 3.5})
        assert report.total == 3.5
        assert report.lats == []

    @pytest.mark.parametrize("name", [*PARALLEL_FIELDS, "histogram", "latency_distribution"])
    @pytest.mark.parametrize("value", [None, 5, "0.1,0.2"])
    def test_from_dict_sequence_field_not_list(self, name, value):
        with pytest.raises(PreconditionError, match=f"'{name}' must be a list"):
            Report.from_dict({name: value})

    @pytest.mark.parametrize("name", ["status_code_dist", "error_dist"])
    def test_from_dict_mapping_field_not_dict(self, name):
        with pytest.raises(PreconditionError, match=f"'{name}' must be a mapping"):
            Report.from_dict({name: [1, 2]})

    def test_from_dict_unknown_field(self):
        with pytest.raises(PreconditionError, match="Unknown report fields: bogus"):
            Report.from_dict({"total": 1.0, "bogus": 1})
