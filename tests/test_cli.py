"""CLI behaviour tests."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from cli.main import app

FIXTURE = Path(__file__).parent / "fixtures" / "s3_scanner_report.json"


@pytest.fixture
def report_file(tmp_path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "s3_usage.json"
    shutil.copy(FIXTURE, target)
    return target


def test_cli_writes_policy_to_stdout(report_file, capsys):
    code = app(["-file", str(report_file), "-type", "Allow", "-threshold", "100"])
    captured = capsys.readouterr()
    assert code == 0
    policy = json.loads(captured.out)
    assert policy == {
        "Version": "2012-10-17",
        "Statement": {
            "Effect": "Allow",
            "Action": ["s3:GetObject", "s3:ListBuckets", "s3:ListObjects"],
            "Resource": "*",
        },
    }
    assert list(policy) == ["Version", "Statement"]
    assert list(policy["Statement"]) == ["Effect", "Action", "Resource"]


def test_cli_accepts_lowercase_type(report_file, capsys):
    code = app(["-file", str(report_file), "-type", "deny", "-threshold", "10"])
    policy = json.loads(capsys.readouterr().out)
    assert code == 0
    assert policy["Statement"]["Effect"] == "Deny"
    assert policy["Statement"]["Action"] == ["s3:CreateMultipartUpload", "s3:GetBucketLifecycle"]


def test_cli_writes_output_file(report_file, tmp_path, capsys):
    destination = tmp_path / "out" / "scp.json"
    code = app(["-file", str(report_file), "-type", "Allow", "-threshold", "10", "--output", str(destination)])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == ""
    assert f"Wrote {destination}" in captured.err
    policy = json.loads(destination.read_text(encoding="utf-8"))
    assert len(policy["Statement"]["Action"]) == 8


def test_cli_reads_settings_from_config(report_file, tmp_path, capsys):
    config_path = tmp_path / "scpgen.yml"
    config_path.write_text("indent: 4\noutput: policies/scp.json\n", encoding="utf-8")
    code = app(["--config", str(config_path), "-file", str(report_file), "-type", "Deny", "-threshold", "10"])
    assert code == 0
    written = (tmp_path / "policies" / "scp.json").read_text(encoding="utf-8")
    assert '\n    "Statement"' in written


def test_cli_reports_missing_arguments(report_file, capsys):
    code = app(["-file", str(report_file)])
    captured = capsys.readouterr()
    assert code == 2
    assert "-type" in captured.err and "-threshold" in captured.err
    assert "usage: scpgen" in captured.err
    assert captured.out == ""


def test_cli_rejects_invalid_type(report_file, capsys):
    code = app(["-file", str(report_file), "-type", "Permit", "-threshold", "10"])
    captured = capsys.readouterr()
    assert code == 2
    assert "Allow" in captured.err and "Permit" in captured.err


@pytest.mark.parametrize("threshold", ["0", "-5"])
def test_cli_rejects_non_positive_threshold(report_file, capsys, threshold):
    code = app(["-file", str(report_file), "-type", "Allow", "-threshold", threshold])
    captured = capsys.readouterr()
    assert code == 2
    assert "threshold" in captured.err
    assert captured.out == ""


def test_cli_rejects_non_integer_threshold(report_file):
    with pytest.raises(SystemExit) as excinfo:
        app(["-file", str(report_file), "-type", "Allow", "-threshold", "ten"])
    assert excinfo.value.code == 2


def test_cli_rejects_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        app(["-file", str(tmp_path / "missing.json"), "-type", "Allow", "-threshold", "10"])
    assert excinfo.value.code == 2


def test_cli_reports_malformed_report(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    broken = tmp_path / "broken.json"
    broken.write_text('"just a string"', encoding="utf-8")
    code = app(["-file", str(broken), "-type", "Allow", "-threshold", "10"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.err.startswith("Error:")
    assert "usage:" not in captured.err
    assert captured.out == ""


def test_cli_reports_deeply_nested_report_as_malformed(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    nested = tmp_path / "nested.json"
    nested.write_text("[" * 100000, encoding="utf-8")
    code = app(["-file", str(nested), "-type", "Allow", "-threshold", "10"])
    captured = capsys.readouterr()
    assert code == 1
    assert "not valid JSON" in captured.err
