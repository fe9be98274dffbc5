from fastapi import APIRouter

from peer_review.core.questions import DEFAULT_PEER_REVIEW_QUESTIONS
from peer_review.schemas.review import Question

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("/defaults", response_model=list[Question])
def list_default_questions():
    """Standard peer review question set: four 1-5 ratings, three text prompts, two multiple choice."""
    return list(DEFAULT_PEER_REVIEW_QUESTIONS)
