from datetime import datetime, timedelta, timezone

from peer_review.core.questions import DEFAULT_PEER_REVIEW_QUESTIONS
from peer_review.core.review_validation import build_review
from peer_review.core.statistics import compute_overall_rating
from peer_review.schemas.review import (
    FullyAnonymousMetadata,
    Review,
    ReviewRequest,
    ReviewResponse,
)

BASE_TIME = datetime(2025, 6, 24, 9, 0, tzinfo=timezone.utc)


def create_request(
    *,
    request_id: str = "req-1",
    subject_id: str = "emp-400",
    anonymity_level: str = "fully_anonymous",
    questions=DEFAULT_PEER_REVIEW_QUESTIONS,
) -> ReviewRequest:
    return ReviewRequest(
        id=request_id,
        subject_id=subject_id,
        subject_role="Software Engineer",
        subject_department="Engineering",
        review_type="quarterly",
        anonymity_level=anonymity_level,
        selected_reviewers=["emp-200", "emp-201", "emp-202"],
        questions=list(questions),
    )


def rating(question_id: str, value, category: str) -> ReviewResponse:
    return ReviewResponse(question_id=question_id, type="rating", category=category, value=value)


def text(question_id: str, value: str, category: str = "general") -> ReviewResponse:
    return ReviewResponse(question_id=question_id, type="text", category=category, value=value)


def choice(question_id: str, value, category: str = "general") -> ReviewResponse:
    return ReviewResponse(question_id=question_id, type="multiple_choice", category=category, value=value)


def default_responses(
    *,
    technical: int = 4,
    communication: int = 4,
    collaboration: int = 4,
    strengths: str = "Excellent engineer, very reliable",
    improvements: str = "",
) -> list[ReviewResponse]:
    out = [
        rating("technical_competence", technical, "technical"),
        rating("communication_skills", communication, "communication"),
        rating("collaboration", collaboration, "collaboration"),
        text("strengths", strengths),
        choice("work_relationship", "Peer/colleague (same level)"),
        choice("collaboration_frequency", "Weekly"),
    ]
    if improvements:
        out.append(text("improvement_areas", improvements))
    return out


def create_review(
    *,
    review_id: str = "rev-1",
    subject_id: str = "emp-400",
    pseudonym: str | None = None,
    responses: list[ReviewResponse] | None = None,
    overall_rating: float | None = None,
    metadata=None,
) -> Review:
    """Review record built directly, bypassing validation."""
    responses = responses if responses is not None else default_responses()
    return Review(
        id=review_id,
        request_id="req-1",
        reviewer_pseudonym=pseudonym or f"pseudo-{review_id}",
        subject_id=subject_id,
        submitted_at=BASE_TIME,
        responses=responses,
        overall_rating=overall_rating if overall_rating is not None else compute_overall_rating(responses),
        reviewer_metadata=metadata,
    )


def submit_reviews(request: ReviewRequest, count: int, **response_kwargs) -> list[Review]:
    return [
        build_review(
            request=request,
            reviewer_id=f"emp-{200 + i}",
            responses=default_responses(**response_kwargs),
            raw_metadata={"role": "Engineer", "department": "Engineering", "work_relationship": "peer"},
            submitted_at=BASE_TIME + timedelta(minutes=i),
            review_id=f"rev-{i}",
        )
        for i in range(count)
    ]


def peer_metadata(relationship: str = "peer", frequency: str = "weekly") -> FullyAnonymousMetadata:
    return FullyAnonymousMetadata(work_relationship=relationship, collaboration_frequency=frequency)
