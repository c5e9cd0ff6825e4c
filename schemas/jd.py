from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional

class ParseResult(BaseModel):
    """Outcome of one call to the job description parser.

    Either a success carrying whatever the server returned, or a failure
    carrying a user-facing message. Never both.
    """
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    job_name: Optional[str] = Field(None, alias="jobName", description="Job title derived by the parser")
    tags: List[str] = Field(default_factory=list, description="Ordered skill/topic tags")
    success: bool
    message: Optional[str] = None

    @field_validator("job_name", mode="before")
    @classmethod
    def scalar_job_name_as_text(cls, v):
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def missing_tags_are_empty(cls, v):
        return [] if v is None else v

    @classmethod
    def succeeded(cls, body: Optional[Dict[str, Any]] = None) -> "ParseResult":
        # Server fields are merged as-is; a body claiming success=false is overridden.
        return cls.model_validate({**(body or {}), "success": True})

    @classmethod
    def failed(cls, message: str) -> "ParseResult":
        return cls(success=False, message=message)

    @property
    def job_name_or_empty(self) -> str:
        return self.job_name or ""
