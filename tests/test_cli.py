import json

import pytest

from clone_fingerprint import cli
from clone_fingerprint.core.models import BatchResult, BrandMatch, ComparisonResult
from clone_fingerprint.renderer import RenderError


class FakeAnalyzer:
    last_config = None
    error: Exception | None = None

    def __init__(self, render_config) -> None:
        FakeAnalyzer.last_config = render_config

    def run(self, targets):
        if FakeAnalyzer.error is not None:
            raise FakeAnalyzer.error
        return BatchResult(
            template=targets[0],
            results=[
                ComparisonResult(targets[0].url, 100.0, 100.0, BrandMatch.MATCH),
                ComparisonResult(targets[1].url, 40.0, 55.5, BrandMatch.COUNT_MISMATCH),
            ],
        )


@pytest.fixture
def urls_file(tmp_path):
    path = tmp_path / "ListURLs.txt"
    path.write_text("https://legit.test\tAcme\nhttps://clone.test\tAcme\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _fake_analyzer(monkeypatch):
    FakeAnalyzer.error = None
    monkeypatch.setattr(cli, "BatchAnalyzer", FakeAnalyzer)


def test_main_prints_table(urls_file, capsys):
    exit_code = cli.main(["--urls-file", str(urls_file), "--settle-delay", "1", "--headful"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Comparing against template: https://legit.test" in out
    assert "| https://clone.test | 40.00% | 55.50% | Count Mismatch |" in out
    assert FakeAnalyzer.last_config.settle_delay_seconds == 1.0
    assert FakeAnalyzer.last_config.headless is False


def test_main_writes_json_and_markdown(urls_file, tmp_path):
    output = tmp_path / "out" / "report.md"
    json_output = tmp_path / "out" / "report.json"

    exit_code = cli.main(
        [
            "--urls-file",
            str(urls_file),
            "--markdown",
            "--output",
            str(output),
            "--json-output",
            str(json_output),
        ]
    )

    assert exit_code == 0
    assert "# Template Similarity Report" in output.read_text(encoding="utf-8")
    payload = json.loads(json_output.read_text(encoding="utf-8"))
    assert payload[1]["brandNameMatch"] == "Count Mismatch"


def test_main_rejects_invalid_urls_file(tmp_path):
    path = tmp_path / "ListURLs.txt"
    path.write_text("no tab here\n", encoding="utf-8")

    assert cli.main(["--urls-file", str(path)]) == 2


def test_main_reports_render_failure(urls_file, capsys):
    FakeAnalyzer.error = RenderError("Failed to load https://clone.test: timeout")

    assert cli.main(["--urls-file", str(urls_file)]) == 1
    assert capsys.readouterr().out == ""
