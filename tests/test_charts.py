"""Tests for the status bar chart."""

from jobstatus.charts import build_status_chart
from jobstatus.settings import ChartStyle, StatusSettings
from jobstatus.status import Counts


def _spec(counts, settings=None):
    return build_status_chart(counts, settings).to_dict()


def _values(spec):
    return list(spec["datasets"].values())[0]


class TestBuildStatusChart:
    def test_bar_with_two_categories(self):
        spec = _spec(Counts(success=2, failed=1))
        assert spec["mark"]["type"] == "bar"
        assert [(v["status"], v["count"]) for v in _values(spec)] == [("SUCCESS", 2), ("FAILED", 1)]

    def test_axis_headroom(self):
        spec = _spec(Counts(success=2, failed=5))
        assert spec["encoding"]["y"]["scale"]["domain"] == [0, 6]
        assert spec["encoding"]["y"]["title"] == "Count"

    def test_zero_counts_axis(self):
        assert _spec(Counts())["encoding"]["y"]["scale"]["domain"] == [0, 1]

    def test_colors_and_size(self):
        spec = _spec(Counts(1, 1))
        scale = spec["encoding"]["color"]["scale"]
        assert scale["domain"] == ["SUCCESS", "FAILED"]
        assert scale["range"] == ["green", "red"]
        assert spec["width"] == 300
        assert spec["height"] == 200
        assert spec["title"] == "Job Status"

    def test_custom_style(self):
        settings = StatusSettings(failed_label="NOT OK", chart=ChartStyle(width=400, colors=("blue", "orange")))
        spec = _spec(Counts(1, 0), settings)
        assert spec["width"] == 400
        assert spec["encoding"]["color"]["scale"]["range"] == ["blue", "orange"]
        assert _values(spec)[1]["status"] == "NOT OK"
