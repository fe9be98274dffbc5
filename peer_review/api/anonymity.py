from fastapi import APIRouter

from peer_review.core.anonymity import derive_pseudonym, project_metadata
from peer_review.schemas.anonymity import MetadataProjectionPayload, PseudonymOut, PseudonymPayload
from peer_review.schemas.review import ReviewerMetadata

router = APIRouter(prefix="/anonymity", tags=["anonymity"])


@router.post("/pseudonym", response_model=PseudonymOut)
def create_pseudonym(payload: PseudonymPayload):
    return PseudonymOut(
        pseudonym=derive_pseudonym(payload.reviewer_id, payload.request_id, payload.timestamp),
    )


@router.post("/metadata", response_model=ReviewerMetadata)
def project_reviewer_metadata(payload: MetadataProjectionPayload):
    """
    Reduce reviewer metadata to what the anonymity level may reveal.
    Unknown levels return a record with no reviewer fields.
    """
    return project_metadata(payload.anonymity_level, payload.metadata)
