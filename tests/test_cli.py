import json
from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from zerodetect_cli.main import app
from zerodetect_cli.ui import classify_percentage

runner = CliRunner()

SAMPLE = (
    "The committee reviewed the proposal in detail. Members raised questions about cost, "
    "timing and staffing. A revised draft will be circulated next week for comment."
)


def test_cli_analyze_json_from_argument():
    result = runner.invoke(app, ["analyze", SAMPLE, "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert 0 <= payload["percentage"] <= 100
    assert len(payload["signals"]) == 8
    assert payload["details"]["chars"] == len(SAMPLE)


def test_cli_analyze_reads_stdin():
    result = runner.invoke(app, ["analyze", "--json"], input=SAMPLE + "\n")
    assert result.exit_code == 0
    assert json.loads(result.stdout)["details"]["chars"] == len(SAMPLE)


def test_cli_analyze_rejects_short_text():
    result = runner.invoke(app, ["analyze", "Too short."])
    assert result.exit_code == 1
    assert "at least 50 characters" in result.stdout


def test_cli_analyze_json_error_payload():
    result = runner.invoke(app, ["analyze", "Too short.", "--json"])
    assert result.exit_code == 1
    assert json.loads(result.stdout) == {"error": "Text must be at least 50 characters. Current: 10"}


def test_cli_analyze_renders_report_from_file(tmp_path: Path):
    doc = tmp_path / "doc.txt"
    doc.write_text(SAMPLE, encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--file", str(doc), "--no-chart"])
    assert result.exit_code == 0
    assert "Analysis Complete" in result.stdout
    assert "Signal Breakdown" in result.stdout
    assert "Readability" in result.stdout


def test_cli_analyze_renders_rhythm_chart(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("ZERODETECT_CHART", "on")
    result = runner.invoke(app, ["analyze", SAMPLE])
    assert result.exit_code == 0
    assert "Sentence Rhythm" in result.stdout


def test_cli_analyze_missing_file(tmp_path: Path):
    result = runner.invoke(app, ["analyze", "--file", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1
    assert "Could not read" in result.stdout


def test_cli_batch_reports_failures_without_aborting(tmp_path: Path):
    good = tmp_path / "good.txt"
    good.write_text(SAMPLE, encoding="utf-8")
    short = tmp_path / "short.txt"
    short.write_text("tiny", encoding="utf-8")

    result = runner.invoke(app, ["batch", str(good), str(short), "--json"])
    assert result.exit_code == 0
    documents = json.loads(result.stdout)["documents"]
    assert [Path(d["file"]).name for d in documents] == ["good.txt", "short.txt"]
    assert "percentage" in documents[0]
    assert "at least 50 characters" in documents[1]["error"]


def test_cli_batch_table(tmp_path: Path):
    good = tmp_path / "good.txt"
    good.write_text(SAMPLE, encoding="utf-8")
    result = runner.invoke(app, ["batch", str(good)])
    assert result.exit_code == 0
    assert "Batch Complete" in result.stdout


def test_cli_interactive_session(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("ZERODETECT_BANNER", "off")
    monkeypatch.setenv("ZERODETECT_CHART", "on")
    result = runner.invoke(app, ["interactive"], input="help\nchart\nexit\n")
    assert result.exit_code == 0
    assert "Available Commands" in result.stdout
    assert "chart disabled" in result.stdout
    assert "Goodbye" in result.stdout


def test_cli_interactive_load(monkeypatch: MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("ZERODETECT_BANNER", "off")
    monkeypatch.setenv("ZERODETECT_CHART", "off")
    doc = tmp_path / "doc.txt"
    doc.write_text(SAMPLE, encoding="utf-8")
    result = runner.invoke(app, ["interactive"], input=f"load {doc}\n")
    assert result.exit_code == 0
    assert "Analysis Complete" in result.stdout
    assert "Session terminated" in result.stdout


def test_classification_tiers():
    assert classify_percentage(0) == "Definitely Human"
    assert classify_percentage(19) == "Definitely Human"
    assert classify_percentage(20) == "Likely Human"
    assert classify_percentage(39) == "Likely Human"
    assert classify_percentage(40) == "Mixed/Uncertain"
    assert classify_percentage(59) == "Mixed/Uncertain"
    assert classify_percentage(60) == "Likely AI"
    assert classify_percentage(79) == "Likely AI"
    assert classify_percentage(80) == "Definitely AI"
    assert classify_percentage(100) == "Definitely AI"
