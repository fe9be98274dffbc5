from pydantic import BaseModel

from peer_review.core.text_classifier import Classification


class TextPayload(BaseModel):
    text: str


class ClassificationOut(BaseModel):
    classification: Classification


class KeywordsOut(BaseModel):
    keywords: list[str]
