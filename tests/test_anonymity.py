import logging
from datetime import datetime, timezone

import pytest

from peer_review.core.anonymity import derive_pseudonym, project_metadata, resolve_anonymity_level
from peer_review.core.errors import UnknownPolicyLevel
from peer_review.schemas.review import RawReviewerMetadata, WithheldMetadata

RAW = {
    "role": "X",
    "department": "Y",
    "work_relationship": "peer",
    "collaboration_frequency": "daily",
}


def _fields(meta) -> dict:
    return meta.model_dump(exclude={"level"})


def test_fully_anonymous_keeps_only_relationship_and_frequency():
    meta = project_metadata("fully_anonymous", RAW)
    assert _fields(meta) == {"work_relationship": "peer", "collaboration_frequency": "daily"}
    assert not hasattr(meta, "role")
    assert not hasattr(meta, "department")


def test_role_visible_adds_role():
    meta = project_metadata("role_visible", RAW)
    assert _fields(meta) == {"work_relationship": "peer", "collaboration_frequency": "daily", "role": "X"}


def test_department_visible_is_strict_superset():
    anonymous = set(_fields(project_metadata("fully_anonymous", RAW)).items())
    role = set(_fields(project_metadata("role_visible", RAW)).items())
    department = set(_fields(project_metadata("department_visible", RAW)).items())

    assert anonymous < role < department
    assert dict(department) == RAW


def test_unlisted_fields_are_dropped():
    raw = {**RAW, "name": "Jordan Reviewer", "email": "jordan@local.test", "reviewer_id": "emp-200"}
    dumped = project_metadata("department_visible", raw).model_dump()
    for leaked in ("name", "email", "reviewer_id"):
        assert leaked not in dumped


def test_accepts_raw_metadata_model_and_none():
    meta = project_metadata("role_visible", RawReviewerMetadata(role="Designer"))
    assert meta.role == "Designer"
    assert meta.work_relationship is None

    empty = project_metadata("fully_anonymous", None)
    assert _fields(empty) == {"work_relationship": None, "collaboration_frequency": None}


def test_unknown_level_withholds_everything(caplog):
    with caplog.at_level(logging.WARNING, logger="peer_review.core.anonymity"):
        meta = project_metadata("manager_visible", RAW)

    assert isinstance(meta, WithheldMetadata)
    assert meta.model_dump() == {"level": "withheld"}
    assert "manager_visible" in caplog.text


def test_resolve_unknown_level_raises():
    with pytest.raises(UnknownPolicyLevel):
        resolve_anonymity_level("public")


def test_pseudonym_is_deterministic_per_submission():
    ts = datetime(2025, 6, 24, 9, 0, tzinfo=timezone.utc)
    a = derive_pseudonym("emp-200", "req-1", ts)
    b = derive_pseudonym("emp-200", "req-1", ts)

    assert a == b
    assert len(a) == 16
    int(a, 16)  # hex
    assert "emp-200" not in a


def test_pseudonym_changes_with_any_input():
    ts = datetime(2025, 6, 24, 9, 0, tzinfo=timezone.utc)
    later = datetime(2025, 6, 24, 9, 1, tzinfo=timezone.utc)
    base = derive_pseudonym("emp-200", "req-1", ts)

    assert derive_pseudonym("emp-201", "req-1", ts) != base
    assert derive_pseudonym("emp-200", "req-2", ts) != base
    assert derive_pseudonym("emp-200", "req-1", later) != base


def test_pseudonym_depends_on_secret():
    a = derive_pseudonym("emp-200", "req-1", "1719219600000", secret="one")
    b = derive_pseudonym("emp-200", "req-1", "1719219600000", secret="two")
    assert a != b


def test_pseudonyms_do_not_collide_across_reviewers():
    tokens = {derive_pseudonym(f"emp-{i}", "req-1", "2025-06-24") for i in range(2000)}
    assert len(tokens) == 2000
