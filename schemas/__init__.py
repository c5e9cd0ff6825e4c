from .submission import (
    ALLOWED_EXTENSIONS,
    ALLOWED_MIME_TYPES,
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    FileSubmission,
    SubmissionInput,
    TextSubmission,
    guess_mime_type,
)
from .jd import ParseResult
from .base import IntakeState, NavigationPayload

__all__ = [
    "ALLOWED_EXTENSIONS",
    "ALLOWED_MIME_TYPES",
    "DOCX_MIME_TYPE",
    "PDF_MIME_TYPE",
    "FileSubmission",
    "SubmissionInput",
    "TextSubmission",
    "guess_mime_type",
    "ParseResult",
    "IntakeState",
    "NavigationPayload",
]
