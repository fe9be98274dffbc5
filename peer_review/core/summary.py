from __future__ import annotations

import logging
from collections.abc import Sequence

from peer_review.core.errors import EmptyReviewSetError, InputError
from peer_review.core.statistics import (
    category_ratings,
    confidence_score,
    derive_sentiment,
    round_half_up,
)
from peer_review.core.text_classifier import TextClassifier, default_classifier
from peer_review.core.themes import MAX_THEMES, MIN_THEME_REVIEWERS, common_themes
from peer_review.schemas.review import Review
from peer_review.schemas.summary import PeerReviewSummary, ReviewerBreakdown

logger = logging.getLogger(__name__)

MAX_STRENGTHS = 5
MAX_IMPROVEMENTS = 3


def _text_answers(review: Review) -> list[str]:
    return [
        r.value
        for r in review.responses
        if r.type == "text" and isinstance(r.value, str) and r.value.strip()
    ]


def _bump(counter: dict[str, int], key: str | None) -> None:
    if key:
        counter[key] = counter.get(key, 0) + 1


def reviewer_breakdown(reviews: Sequence[Review]) -> ReviewerBreakdown:
    by_role: dict[str, int] = {}
    by_department: dict[str, int] = {}
    by_relationship: dict[str, int] = {}

    for review in reviews:
        meta = review.reviewer_metadata
        if meta is None:
            continue
        # fields absent from the level's record read as None
        _bump(by_role, getattr(meta, "role", None))
        _bump(by_department, getattr(meta, "department", None))
        _bump(by_relationship, getattr(meta, "work_relationship", None))

    return ReviewerBreakdown(
        by_role=by_role,
        by_department=by_department,
        by_relationship=by_relationship,
    )


class SummaryComposer:
    """
    Builds a PeerReviewSummary from the complete review set of one subject.

    Each call is a fresh projection of its input; nothing is cached or updated
    in place. Re-summarize with the full set whenever a review is added.
    """

    def __init__(
        self,
        classifier: TextClassifier | None = None,
        *,
        max_strengths: int = MAX_STRENGTHS,
        max_improvements: int = MAX_IMPROVEMENTS,
        max_themes: int = MAX_THEMES,
        min_theme_reviewers: int = MIN_THEME_REVIEWERS,
    ) -> None:
        self.classifier = classifier or default_classifier
        self.max_strengths = max_strengths
        self.max_improvements = max_improvements
        self.max_themes = max_themes
        self.min_theme_reviewers = min_theme_reviewers

    def summarize(self, subject_id: str, reviews: Sequence[Review]) -> PeerReviewSummary:
        if not reviews:
            raise EmptyReviewSetError(subject_id)

        foreign = [r.id for r in reviews if r.subject_id != subject_id]
        if foreign:
            raise InputError(
                "Reviews belong to a different subject",
                errors=[
                    {"field": review_id, "code": "subject_mismatch", "message": f"Not a review of {subject_id}"}
                    for review_id in foreign
                ],
            )

        categories = category_ratings(reviews)
        total = len(reviews)
        average = sum(r.overall_rating for r in reviews) / total

        strengths: list[str] = []
        improvements: list[str] = []
        texts_by_reviewer: dict[str, list[str]] = {}
        for review in reviews:
            answers = _text_answers(review)
            texts_by_reviewer.setdefault(review.reviewer_pseudonym, []).extend(answers)
            for text in answers:
                label = self.classifier.classify(text)
                if label == "strength":
                    strengths.append(text)
                elif label == "improvement":
                    improvements.append(text)

        themes = common_themes(
            texts_by_reviewer,
            min_reviewers=self.min_theme_reviewers,
            limit=self.max_themes,
            classifier=self.classifier,
        )

        sentiment = derive_sentiment(average, len(strengths), len(improvements))

        logger.debug(
            "Summarized subject=%s reviews=%d strengths=%d improvements=%d themes=%d",
            subject_id, total, len(strengths), len(improvements), len(themes),
        )

        return PeerReviewSummary(
            subject_id=subject_id,
            total_reviews=total,
            average_rating=round_half_up(average, 1),
            category_ratings=categories,
            strengths=strengths[: self.max_strengths],
            improvement_areas=improvements[: self.max_improvements],
            common_themes=themes,
            reviewer_breakdown=reviewer_breakdown(reviews),
            sentiment=sentiment,
            confidence_score=confidence_score(total),
        )


default_composer = SummaryComposer()


def summarize(subject_id: str, reviews: Sequence[Review]) -> PeerReviewSummary:
    return default_composer.summarize(subject_id, reviews)
