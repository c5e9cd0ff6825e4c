"""Errors raised by the intake flow."""
from typing import Optional


class IntakeError(Exception):
    """Base class for intake failures"""


class UserInputError(IntakeError):
    """Nothing selected, blank text or a file of the wrong type"""


class ExtractionError(IntakeError):
    """The document could not be turned into text"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class UnsupportedFormat(ExtractionError):
    pass


class ReadError(ExtractionError):
    pass


class ParseError(ExtractionError):
    pass
