from peer_review.core.text_classifier import (
    TextClassifier,
    classify_text,
    extract_keywords,
)


def test_extract_keywords_drops_stop_words_and_short_tokens():
    assert extract_keywords("The team is excellent and very effective") == ["team", "excellent", "effective"]


def test_extract_keywords_strips_punctuation_and_lowercases():
    assert extract_keywords("Great mentor! Clear, concise (and kind).") == [
        "great", "mentor", "clear", "concise", "kind",
    ]


def test_extract_keywords_keeps_first_occurrence_order_without_repeats():
    assert extract_keywords("Testing code, testing docs, code reviews") == ["testing", "code", "docs", "reviews"]


def test_extract_keywords_caps_at_ten():
    text = "alpha bravo charlie delta echo foxtrot golf hotel india juliet kilo lima"
    kws = extract_keywords(text)
    assert len(kws) == 10
    assert kws[-1] == "juliet"


def test_extract_keywords_empty_text():
    assert extract_keywords("") == []
    assert extract_keywords("   ") == []


def test_classify_strength():
    assert classify_text("An excellent and reliable engineer") == "strength"


def test_classify_improvement():
    assert classify_text("Needs to improve documentation and should delegate") == "improvement"


def test_classify_is_case_insensitive():
    assert classify_text("EXCELLENT, GREAT, HELPFUL") == "strength"


def test_classify_tie_is_neutral():
    # one strength hit ("great"), one improvement hit ("could")
    assert classify_text("Great ideas, could share them earlier") == "neutral"
    assert classify_text("Attends the weekly sync") == "neutral"


def test_classify_counts_each_keyword_once():
    # "good" twice is still one strength point against two improvement points
    assert classify_text("good good, but needs to focus on testing") == "improvement"


def test_classify_matches_substrings():
    # "developing" contains "develop"
    assert classify_text("Still developing") == "improvement"


def test_negation_is_not_understood():
    assert classify_text("not effective") == "strength"


def test_injected_lexicon():
    classifier = TextClassifier(
        strength_keywords=["hervorragend"],
        improvement_keywords=["verbessern"],
        stop_words=["und", "ist"],
    )
    assert classifier.classify("Hervorragend und zuverlässig") == "strength"
    assert classifier.classify("Muss Tests verbessern") == "improvement"
    assert classifier.extract_keywords("Sie ist hervorragend und klug") == ["sie", "hervorragend", "klug"]
