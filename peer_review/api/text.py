from fastapi import APIRouter

from peer_review.core.text_classifier import classify_text, extract_keywords
from peer_review.schemas.text import ClassificationOut, KeywordsOut, TextPayload

router = APIRouter(prefix="/text", tags=["text"])


@router.post("/classify", response_model=ClassificationOut)
def classify(payload: TextPayload):
    return ClassificationOut(classification=classify_text(payload.text))


@router.post("/keywords", response_model=KeywordsOut)
def keywords(payload: TextPayload):
    return KeywordsOut(keywords=extract_keywords(payload.text))
