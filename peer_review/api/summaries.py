from fastapi import APIRouter, HTTPException, status

from peer_review.core.errors import EmptyReviewSetError, InputError
from peer_review.core.summary import summarize
from peer_review.schemas.summary import PeerReviewSummary, SummaryRequest

router = APIRouter(prefix="/summaries", tags=["summaries"])


@router.post("", response_model=PeerReviewSummary)
def create_summary(payload: SummaryRequest):
    """
    Aggregate the complete current review set for one subject.
    Send every review each time; summaries are never updated incrementally.
    """
    try:
        return summarize(payload.subject_id, payload.reviews)
    except EmptyReviewSetError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(e), "errors": []},
        )
    except InputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": e.message, "errors": e.errors},
        )
