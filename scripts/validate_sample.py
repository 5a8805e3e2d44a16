import sys
from pathlib import Path

from magicguard.core.file_validation import detect_file_type, validate_file_buffer


def _spoofed_name(path: Path, actual_type: str) -> str:
    """Same stem with an extension the detected type does not satisfy."""
    spoof_ext = "exe" if actual_type == "png" else "png"
    return f"{path.stem}.{spoof_ext}"


def validate_sample(file_path: str) -> None:
    print("\n" + "="*50)
    print("🔍 Checking file content against extension")
    print("="*50)

    path = Path(file_path)
    contents = path.read_bytes()

    # ── Same bytes, true name and a spoofed one ───────
    spoofed = _spoofed_name(path, detect_file_type(contents))
    for name in (path.name, spoofed):
        result = validate_file_buffer(contents, name)
        print(f"\n📄 Name:      {result.file_name}")
        print(f"🏷️  Extension: {result.extension}")
        print(f"🔎 Detected:  {result.actual_type}")
        print(f"{'✅' if result.is_valid else '❌'} Valid:     {result.is_valid}")


if __name__ == "__main__":
    validate_sample(sys.argv[1] if len(sys.argv) > 1 else "samples/download.jpeg")
