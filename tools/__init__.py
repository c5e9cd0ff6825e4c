"""Document extraction and intake errors."""
from .content_extractor import extract, extract_path
from .exceptions import (
    IntakeError,
    UserInputError,
    ExtractionError,
    UnsupportedFormat,
    ReadError,
    ParseError,
)

__all__ = [
    "extract",
    "extract_path",
    "IntakeError",
    "UserInputError",
    "ExtractionError",
    "UnsupportedFormat",
    "ReadError",
    "ParseError",
]
