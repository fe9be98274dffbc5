from typing import Any


class PeerReviewError(Exception):
    """Base class for errors raised by the aggregation engine."""


class InputError(PeerReviewError):
    """
    Malformed review input: a response whose type does not match its question,
    a rating outside the declared scale, or reviews that belong to another subject.

    `errors` uses the same {"field", "code", "message"} shape as form validation.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class EmptyReviewSetError(PeerReviewError):
    """A summary was requested for zero reviews."""

    def __init__(self, subject_id: str):
        super().__init__(f"Cannot summarize subject {subject_id!r}: no reviews")
        self.subject_id = subject_id


class UnknownPolicyLevel(PeerReviewError):
    """Anonymity level outside fully_anonymous | role_visible | department_visible."""

    def __init__(self, level: Any):
        super().__init__(f"Unknown anonymity level: {level!r}")
        self.level = level
