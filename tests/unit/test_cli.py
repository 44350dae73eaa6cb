import json
import xml.etree.ElementTree as ET
from pathlib import Path

from barchart.app_shell.cli import main

PROJECT_ROOT = Path(__file__).parent.parent.parent
RULES = str(PROJECT_ROOT / "rules.yaml")


def test_render_svg_snapshot(tmp_path, capsys):
    out = tmp_path / "chart.svg"

    code = main(["--rules", RULES, "render", "--width", "600", "--viewport-height", "800", "--out", str(out)])

    assert code == 0
    root = ET.fromstring(out.read_text())
    assert root.get("width") == "600"
    assert root.get("height") == "400"
    assert "Wrote 4-bar chart (600x400)" in capsys.readouterr().out


def test_render_png_snapshot(tmp_path):
    out = tmp_path / "chart.png"

    code = main(
        ["--rules", RULES, "--cache", str(tmp_path / "cache"), "render", "--out", str(out)]
    )

    assert code == 0
    assert out.read_bytes().startswith(b"\x89PNG")
    assert list((tmp_path / "cache" / "charts").iterdir())


def test_render_from_data_file(tmp_path):
    data = tmp_path / "data.json"
    data.write_text(json.dumps([{"name": "only", "count": 7}]))
    out = tmp_path / "chart.svg"

    code = main(["--rules", RULES, "--data", str(data), "render", "--out", str(out)])

    assert code == 0
    assert "only" in out.read_text()


def test_render_too_narrow_fails(tmp_path):
    out = tmp_path / "chart.svg"

    code = main(["--rules", RULES, "render", "--width", "50", "--out", str(out)])

    assert code == 1
    assert not out.exists()


def test_render_missing_rules_uses_defaults(tmp_path):
    out = tmp_path / "chart.svg"

    code = main(["--rules", str(tmp_path / "absent.yaml"), "render", "--out", str(out)])

    assert code == 0
    assert "Count in Bin" in out.read_text()


def test_render_bad_data_file(tmp_path):
    out = tmp_path / "chart.svg"

    code = main(["--rules", RULES, "--data", str(tmp_path / "nope.json"), "render", "--out", str(out)])

    assert code == 1


def test_render_invalid_records(tmp_path):
    data = tmp_path / "data.json"
    data.write_text(json.dumps([{"name": "neg", "count": -3}]))
    out = tmp_path / "chart.svg"

    code = main(["--rules", RULES, "--data", str(data), "render", "--out", str(out)])

    assert code == 1
    assert not out.exists()
