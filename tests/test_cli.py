"""CLI smoke tests."""

import json

from divi_blocks.cli import main
from tests.markup import image, section, text


def test_extract_json(tmp_path):
    source = tmp_path / "page.txt"
    source.write_text(section(text("Hello"), image("/uploads/a.png")), encoding="utf-8")
    out = tmp_path / "page.json"

    code = main(["extract", "--input", str(source), "--output", str(out), "--deterministic-keys"])

    assert code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data[0]["_type"] == "columns"
    assert [c["_key"] for c in data[0]["columns"]] == ["k2", "k4"]


def test_extract_markdown_and_ndjson(tmp_path):
    source = tmp_path / "page.txt"
    source.write_text(section(text("<p>Hi</p>")), encoding="utf-8")

    md = tmp_path / "page.md"
    assert main(["extract", "--input", str(source), "--format", "markdown", "--output", str(md)]) == 0
    assert md.read_text(encoding="utf-8") == "Hi\n\n"

    nd = tmp_path / "page.ndjson"
    assert main(["extract", "--input", str(source), "--format", "ndjson", "--output", str(nd)]) == 0
    assert json.loads(nd.read_text(encoding="utf-8").splitlines()[0])["_type"] == "textBlock"


def test_extract_missing_file(tmp_path):
    assert main(["extract", "--input", str(tmp_path / "missing.txt")]) == 1


def test_config_action(capsys):
    assert main(["config"]) == 0
    assert "asset_prefix=image@" in capsys.readouterr().out


def test_no_action_prints_help():
    assert main([]) == 1
