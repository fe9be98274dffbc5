from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from peer_review.schemas.review import Review

Sentiment = Literal["positive", "neutral", "mixed", "negative"]


class CategoryRating(BaseModel):
    model_config = ConfigDict(frozen=True)

    average: float
    count: int
    distribution: list[int]  # index 0 holds the count of 1-ratings


class ReviewerBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    by_role: dict[str, int] = Field(default_factory=dict)
    by_department: dict[str, int] = Field(default_factory=dict)
    by_relationship: dict[str, int] = Field(default_factory=dict)


class PeerReviewSummary(BaseModel):
    """Aggregated view of every completed review for one subject"""
    model_config = ConfigDict(frozen=True)

    subject_id: str
    total_reviews: int
    average_rating: float
    category_ratings: dict[str, CategoryRating] = Field(default_factory=dict)
    strengths: list[str] = Field(default_factory=list)  # at most 5
    improvement_areas: list[str] = Field(default_factory=list)  # at most 3
    common_themes: list[str] = Field(default_factory=list)  # at most 5
    reviewer_breakdown: ReviewerBreakdown = Field(default_factory=ReviewerBreakdown)
    sentiment: Sentiment
    confidence_score: float = Field(ge=0.0, le=1.0)


class SummaryRequest(BaseModel):
    subject_id: str = Field(min_length=1)
    reviews: list[Review] = Field(default_factory=list)
