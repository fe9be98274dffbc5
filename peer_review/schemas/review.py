from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

AnonymityLevel = Literal["fully_anonymous", "role_visible", "department_visible"]
QuestionType = Literal["rating", "text", "multiple_choice", "ranking"]
QuestionCategory = Literal["technical", "communication", "leadership", "collaboration", "general"]
ReviewType = Literal["quarterly", "annual", "project_based", "ad_hoc"]
RequestStatus = Literal["pending", "in_progress", "completed", "expired"]

ResponseValue = Union[int, float, str, list[str]]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class RatingScale(_Frozen):
    min: int = 1
    max: int = 5
    labels: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _bounds_ordered(self):
        if self.min > self.max:
            raise ValueError("rating_scale.min must be <= rating_scale.max")
        return self


class Question(_Frozen):
    id: str = Field(min_length=1, max_length=100)
    type: QuestionType
    category: QuestionCategory = "general"
    question: str = ""
    required: bool = False
    options: list[str] | None = None  # multiple_choice / ranking
    rating_scale: RatingScale | None = None  # rating

    @model_validator(mode="after")
    def _constraints_for_type(self):
        if self.type == "rating" and self.rating_scale is None:
            raise ValueError(f"rating question {self.id!r} must declare rating_scale")
        if self.type in ("multiple_choice", "ranking") and not self.options:
            raise ValueError(f"{self.type} question {self.id!r} must declare options")
        return self


class ReviewRequest(_Frozen):
    """A request for peer feedback about one subject. The question set is fixed once created."""
    id: str
    subject_id: str
    subject_role: str | None = None
    subject_department: str | None = None
    requested_by: str | None = None
    requested_at: datetime | None = None
    due_date: datetime | None = None
    status: RequestStatus = "pending"
    review_type: ReviewType = "ad_hoc"
    anonymity_level: AnonymityLevel = "fully_anonymous"
    selected_reviewers: list[str] = Field(default_factory=list)
    instructions: str | None = None
    questions: list[Question]

    @model_validator(mode="after")
    def _unique_question_ids(self):
        seen: set[str] = set()
        for q in self.questions:
            if q.id in seen:
                raise ValueError(f"duplicate question id: {q.id!r}")
            seen.add(q.id)
        return self

    def question_map(self) -> dict[str, Question]:
        return {q.id: q for q in self.questions}


class ReviewResponse(_Frozen):
    question_id: str
    type: QuestionType
    category: str  # copied from the question so aggregation needs no join
    value: ResponseValue


class RawReviewerMetadata(BaseModel):
    """Everything the caller knows about a reviewer. Extra fields are accepted and never kept."""
    model_config = ConfigDict(extra="allow")

    role: str | None = None
    department: str | None = None
    work_relationship: str | None = None  # direct_report | peer | manager | cross_functional
    collaboration_frequency: str | None = None  # daily | weekly | monthly | rarely


class WithheldMetadata(_Frozen):
    level: Literal["withheld"] = "withheld"


class FullyAnonymousMetadata(_Frozen):
    level: Literal["fully_anonymous"] = "fully_anonymous"
    work_relationship: str | None = None
    collaboration_frequency: str | None = None


class RoleVisibleMetadata(FullyAnonymousMetadata):
    level: Literal["role_visible"] = "role_visible"
    role: str | None = None


class DepartmentVisibleMetadata(RoleVisibleMetadata):
    level: Literal["department_visible"] = "department_visible"
    department: str | None = None


ReviewerMetadata = Annotated[
    Union[WithheldMetadata, FullyAnonymousMetadata, RoleVisibleMetadata, DepartmentVisibleMetadata],
    Field(discriminator="level"),
]


class Review(_Frozen):
    """One reviewer's submission. Holds the pseudonym only, never the raw reviewer id."""
    id: str
    request_id: str
    reviewer_pseudonym: str
    subject_id: str
    submitted_at: datetime
    responses: list[ReviewResponse] = Field(default_factory=list)
    overall_rating: float = 0.0
    is_complete: bool = True
    missing_required: list[str] = Field(default_factory=list)
    reviewer_metadata: ReviewerMetadata | None = None
