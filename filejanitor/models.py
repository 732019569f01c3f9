"""Value types shared by the scanner, planner and executor."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ScannedFile:
    """A file found by a scan, with its normalised extension."""

    path: Path
    extension: str


@dataclass(frozen=True)
class Candidate:
    """The pieces of a destination path used to build alternative names."""

    parent: Path
    stem: str
    extension: str


class OperationStatus(enum.Enum):
    """Outcome of carrying out one planned move."""

    FAILURE = "failure"
    SUCCESS = "success"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class PlannedMove:
    """A move from ``source`` to ``destination`` into the named bucket."""

    source: Path
    destination: Path
    bucket_name: str


@dataclass(frozen=True)
class FailedOperation:
    """A move that could not be carried out, with the error that stopped it."""

    source: Path
    destination: Path
    error: OSError


@dataclass
class MovementPlan:
    """An ordered list of moves to carry out."""

    operations: list[PlannedMove] = field(default_factory=list)

    def __iter__(self) -> Iterator[PlannedMove]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)


@dataclass(frozen=True)
class OperationResult:
    """The status of one operation; ``failure`` is set only when it failed."""

    status: OperationStatus
    failure: Optional[FailedOperation] = None

    def __post_init__(self) -> None:
        if self.status is OperationStatus.FAILURE and self.failure is None:
            raise ValueError("a failed result needs failure details")
        if self.status is not OperationStatus.FAILURE and self.failure is not None:
            raise ValueError("only a failed result may carry failure details")

    @classmethod
    def success(cls) -> OperationResult:
        return cls(OperationStatus.SUCCESS)

    @classmethod
    def failed(cls, operation: PlannedMove, error: OSError) -> OperationResult:
        return cls(
            OperationStatus.FAILURE,
            FailedOperation(operation.source, operation.destination, error),
        )

    @classmethod
    def skipped(cls) -> OperationResult:
        return cls(OperationStatus.SKIPPED)