"""Turn a list of files into a plan that sorts them into per-extension buckets."""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from pathlib import Path

from .models import MovementPlan, PlannedMove, ScannedFile
from .safe_fs import StrPath

NO_EXTENSION_BUCKET = "no_extension"


def _extension(name: str) -> str:
    """Return the extension of a file name, dot included, or an empty string.

    A leading dot (as in ``.bashrc``) starts the stem, not an extension, and a
    trailing dot counts as an extension of its own.
    """
    if name in ("", ".", ".."):
        return ""
    position = name.rfind(".")
    if position <= 0:
        return ""
    return name[position:]


def normalize_extension(path: StrPath) -> str:
    """Return the lower-cased extension of ``path``, or ``""`` if it has none."""
    return _extension(Path(path).name).lower()


def bucket_name(extension: str) -> str:
    """Name the bucket for a normalised extension."""
    return extension[1:] if extension else NO_EXTENSION_BUCKET


def generate_plan(raw_files: Iterable[StrPath], root_path: StrPath) -> MovementPlan:
    """Plan a move of every file into ``root_path/<bucket>/<file name>``.

    Moves are ordered by extension, so files sharing a bucket are adjacent.
    """
    root = Path(root_path)
    scanned = sorted(
        (ScannedFile(Path(p), normalize_extension(p)) for p in raw_files),
        key=lambda f: f.extension,
    )
    operations: list[PlannedMove] = []
    for extension, group in itertools.groupby(scanned, key=lambda f: f.extension):
        bucket = bucket_name(extension)
        operations.extend(
            PlannedMove(
                source=f.path,
                destination=root / bucket / f.path.name,
                bucket_name=bucket,
            )
            for f in group
        )
    return MovementPlan(operations)