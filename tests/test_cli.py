"""Tests for the check command."""
import json
import sys
from pathlib import Path

import pytest

from magicguard.core.cli import check


def test_check_prints_one_result_per_file(
    tmp_path: Path,
    png_bytes: bytes,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    good = tmp_path / "image.png"
    good.write_bytes(png_bytes)
    spoofed = tmp_path / "image.jpg"
    spoofed.write_bytes(png_bytes)
    monkeypatch.setattr(sys, "argv", ["check", str(good), str(spoofed)])

    check()

    lines = capsys.readouterr().out.strip().splitlines()
    results = [json.loads(line) for line in lines]
    assert [r["isValid"] for r in results] == [True, False]
    assert results[1]["actualType"] == "png"


def test_check_strict_exits_on_mismatch(
    tmp_path: Path,
    png_bytes: bytes,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    spoofed = tmp_path / "image.gif"
    spoofed.write_bytes(png_bytes)
    monkeypatch.setattr(sys, "argv", ["check", str(spoofed), "--strict"])

    with pytest.raises(SystemExit) as exc_info:
        check()
    assert exc_info.value.code == 1


def test_check_reports_missing_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["check", str(tmp_path / "missing.pdf")])

    check()

    assert "missing.pdf" in capsys.readouterr().err


def test_check_without_paths_prints_usage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["check"])
    with pytest.raises(SystemExit):
        check()
