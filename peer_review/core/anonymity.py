from __future__ import annotations

import hashlib
import hmac
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from peer_review.core.config import settings
from peer_review.core.errors import UnknownPolicyLevel
from peer_review.schemas.review import (
    DepartmentVisibleMetadata,
    FullyAnonymousMetadata,
    RawReviewerMetadata,
    RoleVisibleMetadata,
    WithheldMetadata,
)

logger = logging.getLogger(__name__)

# level -> metadata record carrying exactly the fields that level may reveal
_LEVEL_MODELS = {
    "fully_anonymous": FullyAnonymousMetadata,
    "role_visible": RoleVisibleMetadata,
    "department_visible": DepartmentVisibleMetadata,
}

PSEUDONYM_LENGTH = 16  # hex chars, 64 bits


def derive_pseudonym(
    reviewer_id: str,
    request_id: str,
    timestamp: datetime | Any,
    *,
    secret: str | None = None,
) -> str:
    """
    Keyed digest over "{reviewer_id}-{request_id}-{timestamp}".

    Same inputs always give the same token; without the secret the token
    cannot be walked back to the reviewer id.
    """
    ts = timestamp.isoformat() if isinstance(timestamp, datetime) else str(timestamp)
    key = (secret if secret is not None else settings.PSEUDONYM_SECRET).encode("utf-8")
    message = f"{reviewer_id}-{request_id}-{ts}".encode("utf-8")
    return hmac.new(key, message, hashlib.sha256).hexdigest()[:PSEUDONYM_LENGTH]


def resolve_anonymity_level(level: str):
    try:
        return _LEVEL_MODELS[level]
    except (KeyError, TypeError):
        raise UnknownPolicyLevel(level)


def project_metadata(
    level: str,
    raw: RawReviewerMetadata | Mapping[str, Any] | None,
) -> FullyAnonymousMetadata | WithheldMetadata:
    """
    Reduce a reviewer's raw metadata to the fields the anonymity level permits.
    Unknown levels fall back to the empty field set.
    """
    try:
        model = resolve_anonymity_level(level)
    except UnknownPolicyLevel as e:
        logger.warning("%s; withholding all reviewer metadata", e)
        return WithheldMetadata()

    if raw is None:
        raw = RawReviewerMetadata()
    elif not isinstance(raw, RawReviewerMetadata):
        raw = RawReviewerMetadata.model_validate(dict(raw))

    allowed = set(model.model_fields) - {"level"}
    projected = model(**{name: getattr(raw, name) for name in allowed})
    logger.debug("Projected reviewer metadata at level=%s fields=%s", level, sorted(allowed))
    return projected
