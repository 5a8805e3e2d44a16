"""Tests for the sample validation script."""
import importlib.util
from pathlib import Path

import pytest

_SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "validate_sample.py"


@pytest.fixture
def validate_sample_module():
    found = importlib.util.spec_from_file_location("validate_sample", _SCRIPT)
    module = importlib.util.module_from_spec(found)
    found.loader.exec_module(module)
    return module


@pytest.mark.parametrize("file_name", ["shot.png", "shot.jpg"])
def test_sample_shows_a_mismatch(
    validate_sample_module,
    tmp_path: Path,
    png_bytes: bytes,
    capsys: pytest.CaptureFixture[str],
    file_name: str,
) -> None:
    sample = tmp_path / file_name
    sample.write_bytes(png_bytes)

    validate_sample_module.validate_sample(str(sample))

    out = capsys.readouterr().out
    assert "Valid:     False" in out
    assert "Detected:  png" in out


def test_png_sample_is_spoofed_as_exe(validate_sample_module) -> None:
    assert validate_sample_module._spoofed_name(Path("shot.png"), "png") == "shot.exe"
    assert validate_sample_module._spoofed_name(Path("photo.jpeg"), "jpg") == "photo.png"
