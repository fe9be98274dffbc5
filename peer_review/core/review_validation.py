from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from peer_review.core.anonymity import derive_pseudonym, project_metadata
from peer_review.core.errors import InputError
from peer_review.core.statistics import compute_overall_rating
from peer_review.schemas.review import (
    Question,
    RawReviewerMetadata,
    Review,
    ReviewRequest,
    ReviewResponse,
)

logger = logging.getLogger(__name__)


class ReviewValidation(BaseModel):
    """Outcome of checking a review's responses against its questions."""
    model_config = ConfigDict(frozen=True)

    errors: list[dict] = Field(default_factory=list)
    missing_required: list[str] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def is_complete(self) -> bool:
        return not self.missing_required


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_answered(response: ReviewResponse | None) -> bool:
    if response is None:
        return False
    v = response.value
    if isinstance(v, str):
        return v.strip() != ""
    if isinstance(v, list):
        return len(v) > 0
    return True


def validate_response(question: Question, response: ReviewResponse) -> list[dict]:
    """
    Check one answer against its question.
    Returns list of error dicts (empty if ok).
    """
    errors: list[dict] = []
    key = question.id
    v = response.value

    if response.type != question.type:
        errors.append({"field": key, "code": "type", "message": f"Expected a {question.type} answer"})
        return errors

    if response.category != question.category:
        errors.append({"field": key, "code": "category", "message": f"Category must be {question.category}"})

    if question.type == "rating":
        if not _is_number(v):
            errors.append({"field": key, "code": "type", "message": "Must be a number"})
            return errors

        if not float(v).is_integer():
            errors.append({"field": key, "code": "integer", "message": "Must be an integer"})

        scale = question.rating_scale
        if v < scale.min:
            errors.append({"field": key, "code": "min", "message": f"Must be >= {scale.min}"})
        if v > scale.max:
            errors.append({"field": key, "code": "max", "message": f"Must be <= {scale.max}"})

    elif question.type == "text":
        if not isinstance(v, str):
            errors.append({"field": key, "code": "type", "message": "Must be text"})

    elif question.type == "multiple_choice":
        choices = [v] if isinstance(v, str) else v
        if not isinstance(choices, list):
            errors.append({"field": key, "code": "type", "message": "Must be one or more options"})
        elif any(c not in question.options for c in choices):
            errors.append({"field": key, "code": "choice", "message": "Must be one of allowed choices"})

    elif question.type == "ranking":
        if not isinstance(v, list):
            errors.append({"field": key, "code": "type", "message": "Must be an ordered list of options"})
        elif any(c not in question.options for c in v):
            errors.append({"field": key, "code": "choice", "message": "Must be one of allowed choices"})

    return errors


def validate_review(request: ReviewRequest, responses: Sequence[ReviewResponse]) -> ReviewValidation:
    """
    Full check of a submission: every answer is valid for its question.
    Missing required answers only flag the review as incomplete.
    """
    questions = request.question_map()
    errors: list[dict] = []
    by_question: dict[str, ReviewResponse] = {}

    for r in responses:
        question = questions.get(r.question_id)
        if question is None:
            errors.append({"field": r.question_id, "code": "unknown_question", "message": "Not in request"})
            continue
        if r.question_id in by_question:
            errors.append({"field": r.question_id, "code": "duplicate", "message": "Answered more than once"})
            continue
        by_question[r.question_id] = r
        errors.extend(validate_response(question, r))

    missing = [
        q.id for q in request.questions
        if q.required and not _is_answered(by_question.get(q.id))
    ]
    return ReviewValidation(errors=errors, missing_required=missing)


def build_review(
    *,
    request: ReviewRequest,
    reviewer_id: str,
    responses: Sequence[ReviewResponse],
    raw_metadata: RawReviewerMetadata | Mapping[str, Any] | None = None,
    submitted_at: datetime | None = None,
    review_id: str | None = None,
) -> Review:
    """
    Turn a raw submission into a Review: validate, pseudonymize, project metadata
    at the request's anonymity level, compute the overall rating.
    """
    result = validate_review(request, responses)
    if not result.valid:
        raise InputError("Review validation failed", errors=result.errors)

    submitted_at = submitted_at or datetime.now(timezone.utc)
    review = Review(
        id=review_id or str(uuid.uuid4()),
        request_id=request.id,
        reviewer_pseudonym=derive_pseudonym(reviewer_id, request.id, submitted_at),
        subject_id=request.subject_id,
        submitted_at=submitted_at,
        responses=list(responses),
        overall_rating=compute_overall_rating(responses),
        is_complete=result.is_complete,
        missing_required=result.missing_required,
        reviewer_metadata=project_metadata(request.anonymity_level, raw_metadata),
    )
    logger.debug(
        "Built review %s for request=%s complete=%s",
        review.id, request.id, review.is_complete,
    )
    return review
