"""Collect the regular files directly inside a directory."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .safe_fs import StrPath, safe_scan


@dataclass
class FileCollection:
    """Regular files found by a scan, and the errors met along the way."""

    files: list[Path] = field(default_factory=list)
    errors: list[OSError] = field(default_factory=list)


def collect_files(target_directory: StrPath) -> FileCollection:
    """Scan ``target_directory`` (not recursively) for regular files.

    Directories and other non-regular entries are left out; scan errors are
    gathered instead of raised.
    """
    collection = FileCollection()
    for result in safe_scan(target_directory):
        if isinstance(result, OSError):
            collection.errors.append(result)
        elif isinstance(result, os.DirEntry) and result.is_file():
            collection.files.append(Path(result.path))
    return collection