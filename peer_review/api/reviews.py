from fastapi import APIRouter, HTTPException, status

from peer_review.core.errors import InputError
from peer_review.core.review_validation import build_review, validate_review
from peer_review.schemas.review import Review
from peer_review.schemas.submission import ReviewSubmitPayload, ReviewValidatePayload
from peer_review.schemas.validation import ValidationError, ValidationPreviewResponse

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("/validate", response_model=ValidationPreviewResponse)
def validate_review_preview(payload: ReviewValidatePayload):
    """
    Check a submission without building it.
    Unanswered required questions are warnings: the caller decides whether to accept incomplete reviews.
    """
    result = validate_review(payload.request, payload.responses)
    return ValidationPreviewResponse(
        valid=result.valid,
        errors=[ValidationError(**e) for e in result.errors],
        warnings=[f"Required question '{q}' is unanswered" for q in result.missing_required],
        is_complete=result.is_complete,
    )


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
def submit_review(payload: ReviewSubmitPayload):
    try:
        return build_review(
            request=payload.request,
            reviewer_id=payload.reviewer_id,
            responses=payload.responses,
            raw_metadata=payload.reviewer_metadata,
            submitted_at=payload.submitted_at,
        )
    except InputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": e.message, "errors": e.errors},
        )
