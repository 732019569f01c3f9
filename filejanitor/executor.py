"""Carry out a movement plan, avoiding overwrites where a free name exists."""

from __future__ import annotations

from pathlib import Path

from . import safe_fs
from .execution_report import ExecutionReport
from .models import (
    Candidate,
    MovementPlan,
    OperationResult,
    OperationStatus,
    PlannedMove,
)

MAX_CANDIDATE_INDEX = 100


def _build_candidate(target: Path) -> Candidate:
    name = target.name
    position = name.rfind(".")
    if name in (".", "..") or position <= 0:
        stem, extension = name, ""
    else:
        stem, extension = name[:position], name[position:]
    return Candidate(parent=target.parent, stem=stem, extension=extension)


def candidate_paths(target: Path) -> list[Path]:
    """Alternative names ``stem (n)ext`` for ``target``, n from 1 to 99."""
    candidate = _build_candidate(Path(target))
    return [
        candidate.parent / f"{candidate.stem} ({index}){candidate.extension}"
        for index in range(1, MAX_CANDIDATE_INDEX)
    ]


def resolve_collision(target: Path) -> Path:
    """Return ``target`` if free, else the first free alternative name.

    When every alternative is taken, ``target`` itself is returned.
    """
    target = Path(target)
    if not safe_fs.exists(target):
        return target
    return next(
        (path for path in candidate_paths(target) if not safe_fs.exists(path)),
        target,
    )


def process_operation(operation: PlannedMove) -> OperationResult:
    """Carry out one move and report how it went."""
    if operation.source == operation.destination:
        return OperationResult.skipped()
    try:
        safe_fs.create_directories(operation.destination.parent)
        safe_fs.rename(operation.source, resolve_collision(operation.destination))
    except OSError as exc:
        return OperationResult.failed(operation, exc)
    return OperationResult.success()


def execute_plan(plan: MovementPlan) -> ExecutionReport:
    """Carry out every move in ``plan`` in order and tally the outcomes."""
    report = ExecutionReport()
    for operation in plan.operations:
        result = process_operation(operation)
        report.record_processed()
        if result.status is OperationStatus.SUCCESS:
            report.record_success()
        elif result.status is OperationStatus.FAILURE:
            assert result.failure is not None
            report.record_failure(result.failure)
    return report