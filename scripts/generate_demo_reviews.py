#!/usr/bin/env python3
"""
Generate a reproducible peer review dataset for one subject and summarize it.

Writes the POST /summaries payload (subject_id + reviews) so it can be replayed
against a running service, and prints the resulting summary.
"""

import argparse
import json
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from peer_review.core.questions import DEFAULT_PEER_REVIEW_QUESTIONS  # noqa: E402
from peer_review.core.review_validation import build_review  # noqa: E402
from peer_review.core.summary import summarize  # noqa: E402
from peer_review.schemas.review import ReviewRequest, ReviewResponse  # noqa: E402

DEPARTMENTS = ["Engineering", "Product", "Design", "Customer Success"]
ROLES = ["Software Engineer", "Senior Engineer", "Product Manager", "Designer"]
RELATIONSHIPS = ["peer", "peer", "direct_report", "manager", "cross_functional"]
FREQUENCIES = ["daily", "weekly", "monthly", "rarely"]

STRENGTH_SNIPPETS = [
    "Excellent debugging skills and very reliable under pressure",
    "Great mentor, helpful in code reviews",
    "Strong communicator, keeps the team aligned",
    "Knowledgeable about the platform and always collaborative",
    "Effective at breaking down large projects",
]

IMPROVEMENT_SNIPPETS = [
    "Could improve estimates on larger projects",
    "Should delegate more instead of taking every ticket",
    "Needs to focus on documentation",
    "",
]

FREQUENCY_OPTIONS = {"daily": "Daily", "weekly": "Weekly", "monthly": "Monthly", "rarely": "Rarely"}
RELATIONSHIP_OPTIONS = {
    "peer": "Peer/colleague (same level)",
    "direct_report": "Direct report (they report to me)",
    "manager": "Manager (I report to them)",
    "cross_functional": "Cross-functional collaborator",
}


def generate_reviews(*, subject_id: str, count: int, anonymity_level: str, seed: int = 42):
    rng = random.Random(seed)
    start = datetime(2025, 6, 24, 9, 0, tzinfo=timezone.utc)

    request = ReviewRequest(
        id=f"req-{subject_id}",
        subject_id=subject_id,
        review_type="quarterly",
        anonymity_level=anonymity_level,
        selected_reviewers=[f"emp-{100 + i}" for i in range(count)],
        questions=list(DEFAULT_PEER_REVIEW_QUESTIONS),
    )

    reviews = []
    for i, reviewer_id in enumerate(request.selected_reviewers):
        relationship = rng.choice(RELATIONSHIPS)
        frequency = rng.choice(FREQUENCIES)
        responses = [
            ReviewResponse(question_id=q.id, type="rating", category=q.category, value=rng.randint(2, 5))
            for q in request.questions
            if q.type == "rating"
        ]
        responses += [
            ReviewResponse(question_id="strengths", type="text", category="general",
                           value=rng.choice(STRENGTH_SNIPPETS)),
            ReviewResponse(question_id="improvement_areas", type="text", category="general",
                           value=rng.choice(IMPROVEMENT_SNIPPETS)),
            ReviewResponse(question_id="work_relationship", type="multiple_choice", category="general",
                           value=RELATIONSHIP_OPTIONS[relationship]),
            ReviewResponse(question_id="collaboration_frequency", type="multiple_choice", category="general",
                           value=FREQUENCY_OPTIONS[frequency]),
        ]
        reviews.append(
            build_review(
                request=request,
                reviewer_id=reviewer_id,
                responses=responses,
                raw_metadata={
                    "role": rng.choice(ROLES),
                    "department": rng.choice(DEPARTMENTS),
                    "work_relationship": relationship,
                    "collaboration_frequency": frequency,
                },
                submitted_at=start + timedelta(hours=i),
                review_id=f"rev-{i + 1:03d}",
            )
        )
    return reviews


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate demo peer reviews and print their summary")
    parser.add_argument("--subject", default="emp-400")
    parser.add_argument("--count", type=int, default=6)
    parser.add_argument(
        "--anonymity-level",
        default="department_visible",
        choices=["fully_anonymous", "role_visible", "department_visible"],
    )
    parser.add_argument("--out", type=Path, default=None, help="Write the /summaries payload here")
    args = parser.parse_args(argv)

    reviews = generate_reviews(subject_id=args.subject, count=args.count, anonymity_level=args.anonymity_level)
    summary = summarize(args.subject, reviews)

    if args.out:
        payload = {"subject_id": args.subject, "reviews": [r.model_dump(mode="json") for r in reviews]}
        args.out.write_text(json.dumps(payload, indent=2))
        print(f"✅ Wrote {len(reviews)} reviews to {args.out}")

    print(json.dumps(summary.model_dump(mode="json"), indent=2))
    return summary


if __name__ == "__main__":
    main()
