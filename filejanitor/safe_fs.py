"""Filesystem helpers that report failures without losing the rest of the work."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Union

StrPath = Union[str, "os.PathLike[str]"]

ScanResult = Union[os.DirEntry, OSError]
"""One item of a directory scan: an entry, or the error that ended the scan."""


def safe_scan(path: StrPath) -> Iterator[ScanResult]:
    """Yield the entries of ``path``.

    An error is yielded rather than raised. If the directory cannot be opened,
    or reading it fails part way, the error is the last item produced.
    """
    try:
        iterator = os.scandir(path)
    except OSError as exc:
        yield exc
        return

    with iterator:
        while True:
            try:
                entry = next(iterator)
            except StopIteration:
                return
            except OSError as exc:
                yield exc
                return
            yield entry


def exists(path: StrPath) -> bool:
    """Return whether ``path`` exists; any failure to check counts as absent."""
    try:
        return os.path.exists(path)
    except (OSError, ValueError):
        return False


def rename(source: StrPath, destination: StrPath) -> None:
    """Move ``source`` to ``destination``, replacing a file already there.

    Raises the underlying ``OSError`` on failure.
    """
    os.replace(source, destination)


def create_directories(path: StrPath) -> None:
    """Create ``path`` and any missing parents; an existing directory is fine.

    Raises the underlying ``OSError`` on failure.
    """
    os.makedirs(path, exist_ok=True)