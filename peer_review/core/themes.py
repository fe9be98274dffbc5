from __future__ import annotations

from collections.abc import Iterable, Mapping

from peer_review.core.text_classifier import TextClassifier, default_classifier

MIN_THEME_REVIEWERS = 2
MAX_THEMES = 5


def common_themes(
    texts_by_reviewer: Mapping[str, Iterable[str]],
    *,
    min_reviewers: int = MIN_THEME_REVIEWERS,
    limit: int = MAX_THEMES,
    classifier: TextClassifier | None = None,
) -> list[str]:
    """
    Keywords that at least `min_reviewers` distinct reviewers mentioned,
    most often mentioned first.

    texts_by_reviewer maps a reviewer key (pseudonym) to that reviewer's text answers.
    Mentions are counted once per text answer; equal counts keep the order in
    which keywords were first counted.
    """
    classifier = classifier or default_classifier

    mentions: dict[str, int] = {}
    reviewers: dict[str, int] = {}
    for texts in texts_by_reviewer.values():
        seen_by_reviewer: set[str] = set()
        for text in texts:
            for kw in classifier.extract_keywords(text):
                mentions[kw] = mentions.get(kw, 0) + 1
                seen_by_reviewer.add(kw)
        for kw in seen_by_reviewer:
            reviewers[kw] = reviewers.get(kw, 0) + 1

    shared = [(kw, n) for kw, n in mentions.items() if reviewers[kw] >= min_reviewers]
    shared.sort(key=lambda item: item[1], reverse=True)  # stable
    return [kw for kw, _ in shared[:limit]]
