from datetime import datetime
from pydantic import BaseModel, Field

from peer_review.schemas.review import RawReviewerMetadata


class PseudonymPayload(BaseModel):
    reviewer_id: str = Field(min_length=1)
    request_id: str = Field(min_length=1)
    timestamp: datetime


class PseudonymOut(BaseModel):
    pseudonym: str


class MetadataProjectionPayload(BaseModel):
    anonymity_level: str  # not constrained: unknown levels withhold everything
    metadata: RawReviewerMetadata = Field(default_factory=RawReviewerMetadata)
