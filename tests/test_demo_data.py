import json

from scripts.generate_demo_reviews import generate_reviews, main


def test_generated_reviews_are_reproducible():
    a = generate_reviews(subject_id="emp-400", count=4, anonymity_level="role_visible")
    b = generate_reviews(subject_id="emp-400", count=4, anonymity_level="role_visible")

    assert a == b
    assert all(r.is_complete for r in a)
    assert all(r.reviewer_metadata.level == "role_visible" for r in a)


def test_main_writes_summary_payload(tmp_path, capsys):
    out = tmp_path / "payload.json"
    summary = main(["--count", "6", "--out", str(out)])

    payload = json.loads(out.read_text())
    assert payload["subject_id"] == "emp-400"
    assert len(payload["reviews"]) == 6
    assert summary.total_reviews == 6
    assert summary.confidence_score == 1.0
    assert '"total_reviews": 6' in capsys.readouterr().out
