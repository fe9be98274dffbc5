from datetime import datetime
from pydantic import BaseModel, Field

from peer_review.schemas.review import RawReviewerMetadata, ReviewRequest, ReviewResponse


class ReviewValidatePayload(BaseModel):
    request: ReviewRequest
    responses: list[ReviewResponse] = Field(default_factory=list)


class ReviewSubmitPayload(ReviewValidatePayload):
    reviewer_id: str = Field(min_length=1)
    reviewer_metadata: RawReviewerMetadata | None = None
    submitted_at: datetime | None = None
