from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional
from schemas.jd import ParseResult
from schemas.submission import SubmissionInput

class NavigationPayload(BaseModel):
    """State handed to the interview setup step."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tags: List[str] = Field(default_factory=list, description="Tags derived from the job description")
    selected_interviewer: Any = Field(None, alias="selectedInterviewer", description="Passed through unchanged")
    job_description: str = Field("", alias="jobDescription", description="Raw job description text")

class IntakeState(BaseModel):
    submission: Optional[SubmissionInput] = Field(None, description="What the user submitted")
    selected_interviewer: Any = Field(None, description="Interviewer chosen before intake, opaque")
    bearer_token: Optional[str] = Field(None, description="Token for the parsing API")
    job_description: Optional[str] = Field(None, description="Extracted or typed text")
    parse_result: Optional[ParseResult] = Field(None, description="Parser outcome")
    payload: Optional[NavigationPayload] = Field(None, description="Set once navigation happened")
    error: Optional[str] = Field(None, description="User-facing failure message")
