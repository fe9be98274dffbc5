"""Lexicon-based classification and keyword extraction for free-text feedback.

The classifier counts keyword hits; it does not understand negation, sarcasm or
domain jargon ("not effective" still scores as a strength). Callers needing other
languages or vocabularies pass their own lexicons to TextClassifier.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Literal

Classification = Literal["strength", "improvement", "neutral"]

STRENGTH_KEYWORDS: tuple[str, ...] = (
    "excellent", "great", "strong", "good", "effective", "skilled", "talented",
    "knowledgeable", "reliable", "helpful", "collaborative", "innovative",
)

IMPROVEMENT_KEYWORDS: tuple[str, ...] = (
    "improve", "better", "develop", "enhance", "work on", "focus on", "needs",
    "could", "should", "challenge", "difficulty", "struggle",
)

STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "can", "this", "that", "these", "those",
    "very", "really", "also", "just", "too", "quite", "much", "more", "most",
    "they", "them", "their", "he", "she", "his", "her", "him", "its", "it", "we", "our",
    "you", "your", "from", "about", "into", "than", "then", "there", "when", "what", "which",
})

MAX_KEYWORDS = 10

_PUNCTUATION = re.compile(r"[^\w\s]")


class TextClassifier:
    def __init__(
        self,
        strength_keywords: Iterable[str] = STRENGTH_KEYWORDS,
        improvement_keywords: Iterable[str] = IMPROVEMENT_KEYWORDS,
        stop_words: Iterable[str] = STOP_WORDS,
        max_keywords: int = MAX_KEYWORDS,
    ) -> None:
        self.strength_keywords = tuple(k.lower() for k in strength_keywords)
        self.improvement_keywords = tuple(k.lower() for k in improvement_keywords)
        self.stop_words = frozenset(w.lower() for w in stop_words)
        self.max_keywords = max_keywords

    @staticmethod
    def _score(text: str, keywords: tuple[str, ...]) -> int:
        # one point per keyword present, however often it repeats
        return sum(1 for k in keywords if k in text)

    def classify(self, text: str) -> Classification:
        lowered = text.lower()
        strength = self._score(lowered, self.strength_keywords)
        improvement = self._score(lowered, self.improvement_keywords)

        if strength > improvement:
            return "strength"
        if improvement > strength:
            return "improvement"
        return "neutral"

    def extract_keywords(self, text: str) -> list[str]:
        tokens = _PUNCTUATION.sub(" ", text.lower()).split()

        out: list[str] = []
        seen: set[str] = set()
        for t in tokens:
            if len(t) <= 2 or t in self.stop_words or t in seen:
                continue
            seen.add(t)
            out.append(t)
            if len(out) == self.max_keywords:
                break
        return out


default_classifier = TextClassifier()


def classify_text(text: str) -> Classification:
    return default_classifier.classify(text)


def extract_keywords(text: str) -> list[str]:
    return default_classifier.extract_keywords(text)
