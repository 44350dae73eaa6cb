import json

import pytest
from pydantic import ValidationError

from barchart.adapters.data.file_source import JsonFileDataSource
from barchart.adapters.data.static_source import StaticDataSource
from barchart.app_shell.config import build_data_source
from barchart.domain.entities import DataPoint, coerce_data_points


def test_static_source_serves_mock_bins():
    data = StaticDataSource().get_data()

    assert [(p.name, p.count) for p in data] == [
        ("Bin_0", 20),
        ("Bin_1", 15),
        ("Bin_2", 56),
        ("Bin_3", 40),
    ]


def test_static_source_returns_fresh_list():
    source = StaticDataSource([("A", 1)])

    first = source.get_data()
    first.clear()

    assert len(source.get_data()) == 1


def test_static_source_rejects_negative_counts():
    with pytest.raises(ValidationError):
        StaticDataSource([("A", -3)])


def test_coerce_accepts_mixed_shapes():
    points = coerce_data_points(
        [DataPoint(name="A", count=1), {"name": "B", "count": 2}, ("C", 3), ["D", 4]]
    )

    assert [p.name for p in points] == ["A", "B", "C", "D"]


def test_coerce_rejects_string_counts():
    with pytest.raises(ValidationError):
        coerce_data_points([("A", "20")])


def test_json_source_reads_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([{"name": "x", "count": 3}, {"name": "y", "count": 0}]))

    data = JsonFileDataSource(path).get_data()

    assert data == [DataPoint(name="x", count=3), DataPoint(name="y", count=0)]


def test_json_source_rereads_on_each_call(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([{"name": "x", "count": 3}]))
    source = JsonFileDataSource(path)
    source.get_data()

    path.write_text(json.dumps([{"name": "x", "count": 9}]))

    assert source.get_data()[0].count == 9


def test_json_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        JsonFileDataSource(tmp_path / "missing.json").get_data()


def test_json_source_invalid_content(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([{"name": "x"}]))

    with pytest.raises(ValueError, match="Invalid chart data"):
        JsonFileDataSource(path).get_data()


def test_build_data_source(tmp_path):
    assert isinstance(build_data_source(None), StaticDataSource)
    assert isinstance(build_data_source(tmp_path / "d.json"), JsonFileDataSource)
