"""Failure outcomes of the evaluation flow.

None of these are retried here; retry policy belongs to the caller.
"""

from __future__ import annotations

from typing import Optional


class EvaluationError(Exception):
    """Base class; ``message`` is safe to show to the user."""

    status_code = 500

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class LookupFailure(EvaluationError):
    """Criteria or existing-score fetch failed. Transient, store-originated."""

    status_code = 503


class ConflictResolutionFailure(EvaluationError):
    """The store rejected the upsert batch; nothing from the batch was applied."""

    status_code = 409


class NotFound(EvaluationError):
    """Employee or criterion id absent from its source set."""

    status_code = 404
