import sys
from pathlib import Path

from magicguard.core.file_validation import validate_file_buffer


def check():
    """Validate files on disk - usage: poetry run check <file> [<file> ...] [--strict]."""
    args = sys.argv[1:]
    strict = "--strict" in args
    paths = [a for a in args if not a.startswith("-")]
    if not paths:
        print("Usage: poetry run check <file> [<file> ...] [--strict]")
        print("Example: poetry run check samples/download.jpeg --strict")
        sys.exit(1)

    failures = 0
    for path in paths:
        try:
            contents = Path(path).read_bytes()
        except OSError as e:
            print(f"{path}: {e}", file=sys.stderr)
            failures += 1
            continue
        result = validate_file_buffer(contents, Path(path).name)
        print(result.model_dump_json(by_alias=True))
        if not result.is_valid:
            failures += 1

    if strict and failures:
        sys.exit(1)
