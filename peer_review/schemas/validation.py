from pydantic import BaseModel


class ValidationError(BaseModel):
    """Individual validation error"""
    field: str
    code: str  # type, category, integer, min, max, choice, unknown_question, duplicate
    message: str


class ValidationPreviewResponse(BaseModel):
    """Response from validation preview endpoint"""
    valid: bool
    errors: list[ValidationError]
    warnings: list[str]  # Non-blocking warnings, e.g. unanswered required questions
    is_complete: bool
