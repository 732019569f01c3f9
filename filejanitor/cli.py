"""Command line entry point: scan a directory, plan, and sort its files."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .executor import execute_plan
from .planner import generate_plan
from .scanner import collect_files


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="filejanitor",
        description="Sort the files of a directory into folders by extension.",
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="directory to tidy (default: .)"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the scan, plan and execution phases; return the exit status."""
    args = _parse_args(argv)
    directory = Path(os.path.abspath(args.directory))

    if not directory.exists():
        print(f"Directory not found: {directory}", file=sys.stderr)
        return 1

    print("--- PHASE 1: SCANNING ---")
    collection = collect_files(directory)
    print(f"Found {len(collection.files)} files.")
    if collection.errors:
        print(f"Encountered {len(collection.errors)} errors during scan.")
    if not collection.files:
        print("No files to organize. Exiting.")
        return 0

    print("\n--- PHASE 2: PLANNING ---")
    plan = generate_plan(collection.files, directory)
    print(f"Generated {len(plan)} operations.")
    for op in plan:
        print(f"[PLAN] {op.source.name} -> {op.destination} (Bucket: {op.bucket_name})")

    print("\n--- PHASE 3: EXECUTION ---")
    report = execute_plan(plan)
    print("Execution Complete.")
    print(f"  Processed: {report.processed_count}")
    print(f"  Success:   {report.success_count}")
    print(f"  Failures:  {report.failure_count}")
    print(f"  Skipped:   {report.skipped_count}")

    if report.failure_count > 0:
        print("\n[!] Errors:")
        for failure in report.failures:
            message = failure.error.strerror or str(failure.error)
            print(
                f"  - Failed to move '{failure.source.name}' -> "
                f"'{failure.destination}': {message}"
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())