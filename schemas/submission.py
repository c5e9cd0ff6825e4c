from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, Any, Literal, Union
from pathlib import Path
import mimetypes

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ALLOWED_MIME_TYPES = (PDF_MIME_TYPE, DOCX_MIME_TYPE)
ALLOWED_EXTENSIONS = ("pdf", "docx")

_SUFFIX_MIME_TYPES = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
}

def guess_mime_type(filename: str) -> str:
    """MIME type for a filename, empty string when unknown"""
    suffix = Path(filename).suffix.lower()
    if suffix in _SUFFIX_MIME_TYPES:
        return _SUFFIX_MIME_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or ""

class FileSubmission(BaseModel):
    """An uploaded document.

    ``source`` is the raw payload: bytes, a path on disk, or a readable
    binary stream such as Streamlit's ``UploadedFile``.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["file"] = "file"
    filename: str = Field(..., description="Original file name")
    mime_type: str = Field("", description="Declared MIME type of the upload")
    source: Any = Field(..., description="bytes, Path or binary stream")

    @field_validator("source")
    @classmethod
    def validate_source(cls, v):
        if isinstance(v, (bytes, bytearray, Path)) or hasattr(v, "read"):
            return v
        raise ValueError("source must be bytes, a Path or a readable binary stream")

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FileSubmission":
        path = Path(path)
        return cls(filename=path.name, mime_type=guess_mime_type(path.name), source=path)

    @property
    def has_allowed_type(self) -> bool:
        return self.mime_type in ALLOWED_MIME_TYPES

class TextSubmission(BaseModel):
    kind: Literal["text"] = "text"
    content: str = Field(..., description="Job description typed by the user")

SubmissionInput = Annotated[Union[FileSubmission, TextSubmission], Field(discriminator="kind")]
