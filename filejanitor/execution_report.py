"""Running tally of what happened while a plan was carried out."""

from __future__ import annotations

from .models import FailedOperation


class ExecutionReport:
    """Counts processed, successful, failed and skipped operations."""

    def __init__(self) -> None:
        self._failures: list[FailedOperation] = []
        self._processed = 0
        self._success = 0

    def record_processed(self) -> None:
        self._processed += 1

    def record_success(self) -> None:
        self._success += 1

    def record_failure(self, failure: FailedOperation) -> None:
        self._failures.append(failure)

    @property
    def processed_count(self) -> int:
        return self._processed

    @property
    def success_count(self) -> int:
        return self._success

    @property
    def failure_count(self) -> int:
        return len(self._failures)

    @property
    def skipped_count(self) -> int:
        """Processed operations that neither succeeded nor failed."""
        return self._processed - self._success - self.failure_count

    @property
    def failures(self) -> tuple[FailedOperation, ...]:
        return tuple(self._failures)

    def __repr__(self) -> str:
        return (
            f"ExecutionReport(processed={self.processed_count}, "
            f"success={self.success_count}, failures={self.failure_count}, "
            f"skipped={self.skipped_count})"
        )