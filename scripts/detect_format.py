#!/usr/bin/env python3
"""
Report the chemical file format of one or more files.

Usage:
    python scripts/detect_format.py FILE [FILE ...]

Prints one tab-separated line per file: path, format and reader class
(or "undetermined"). Exits with status 1 if any file is undetermined,
2 on usage errors.

Environment:
    CHEMIO_HEADER_LENGTH: characters inspected per file (default 65536)
    CHEMIO_LOG_LEVEL: logging level (default INFO)
"""

import logging
import sys
from pathlib import Path

from packages.chemio import ReaderFactory, get_reader_class, get_settings, is_implemented

log = logging.getLogger("detect_format")


def describe(factory: ReaderFactory, path: Path) -> str | None:
    """Return the output line for a file, or None when undetermined."""
    with path.open("rb") as handle:
        result = factory.detect(handle)

    if result is None:
        return None

    reader_cls = get_reader_class(result.format)
    status = "" if is_implemented(result.format) else " (no reader)"
    return f"{path}\t{result.format.value}\t{reader_cls.__name__}{status}"


def main(argv: list[str]) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    if not argv:
        print("Usage: python scripts/detect_format.py FILE [FILE ...]", file=sys.stderr)
        return 2

    factory = ReaderFactory()
    exit_code = 0
    for arg in argv:
        path = Path(arg)
        if not path.is_file():
            log.error(f"Not a file: {path}")
            exit_code = 1
            continue

        line = describe(factory, path)
        if line is None:
            print(f"{path}\tundetermined")
            exit_code = 1
        else:
            print(line)
    return exit_code


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
