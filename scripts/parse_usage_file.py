"""Decode a file of usage lines into a JSON array of records.

Usage:
    python scripts/parse_usage_file.py --input usage.txt --output parsed.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from usageparser.core.logging import setup_logging
from usageparser.parsing.batch import parse


def read_lines(path: Path) -> list[str]:
    """Read non-blank lines, without their line endings."""
    return [line for line in path.read_text().splitlines() if line.strip()]


def parse_file(input_path: Path) -> list[dict[str, Any]]:
    records = parse(read_lines(input_path))
    return [record.to_dict() for record in records]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Decode telecom usage lines")
    parser.add_argument("--input", required=True, type=Path, help="File with one usage string per line")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    results = parse_file(args.input)
    payload = json.dumps(results, indent=2)
    if args.output is None:
        print(payload)
    else:
        args.output.write_text(payload + "\n")

    failed = sum(1 for result in results if result.get("error"))
    print(f"  Parsed {len(results)} lines, {failed} failed", file=sys.stderr)
    return 1 if results and failed == len(results) else 0


if __name__ == "__main__":
    sys.exit(main())
