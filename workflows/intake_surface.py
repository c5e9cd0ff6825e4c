"""State machine behind the job description intake screen.

Idle -> Submitting -> {SuccessNavigated | Failed}. Failed (and a finished
navigation) fall back to Idle on the next user action. While Submitting,
every other submission is turned away.
"""
from enum import Enum
from typing import Any, Mapping, Optional, Sequence
from pydantic import BaseModel
from schemas.base import IntakeState, NavigationPayload
from schemas.submission import FileSubmission, TextSubmission
from services.parsing_client import resolve_bearer_token
from tools.exceptions import UserInputError
from workflows.intake_workflow import IntakeWorkflow
from workflows.navigator import Navigator
from logger.logger import LogManager, log_info, log_warn, log_error

NO_FILE_MESSAGE = "Please select a file to upload."
INVALID_FORMAT_MESSAGE = "Invalid file format. Please upload a PDF or DOCX file."
EMPTY_TEXT_MESSAGE = "Please enter a job description."
BUSY_MESSAGE = "The job description is still being processed. Please wait."


class IntakePhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS_NAVIGATED = "success_navigated"
    FAILED = "failed"


class IntakeOutcome(BaseModel):
    phase: IntakePhase
    payload: Optional[NavigationPayload] = None
    message: Optional[str] = None

    @property
    def navigated(self) -> bool:
        return self.payload is not None


class IntakeSurface:
    def __init__(
        self,
        workflow: IntakeWorkflow,
        navigator: Navigator,
        selected_interviewer: Any = None,
        token_stores: Sequence[Optional[Mapping[str, Any]]] = (),
    ):
        self.workflow = workflow
        self.navigator = navigator
        self.selected_interviewer = selected_interviewer
        self.token_stores = tuple(token_stores)
        self.phase = IntakePhase.IDLE
        self.message: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        return self.phase == IntakePhase.SUBMITTING

    def start_session(self):
        """Fresh intake: forget derived fields from earlier attempts"""
        session_id = LogManager.set_session_id()
        self.navigator.clear_session()
        self.phase = IntakePhase.IDLE
        self.message = None
        log_info("Intake session started", session_id=session_id)

    def submit_file(self, file: Optional[FileSubmission]) -> IntakeOutcome:
        if self.is_busy:
            return self._busy()
        self._reset_after_previous_action()
        try:
            if file is None:
                raise UserInputError(NO_FILE_MESSAGE)
            if not file.has_allowed_type:
                raise UserInputError(INVALID_FORMAT_MESSAGE)
        except UserInputError as e:
            return self._inline(str(e))
        return self._run(file, "Error processing file")

    def submit_text(self, text: Optional[str]) -> IntakeOutcome:
        if self.is_busy:
            return self._busy()
        self._reset_after_previous_action()
        try:
            if not text or not text.strip():
                raise UserInputError(EMPTY_TEXT_MESSAGE)
        except UserInputError as e:
            return self._inline(str(e))
        return self._run(TextSubmission(content=text), "Error processing text")

    def skip(self) -> IntakeOutcome:
        if self.is_busy:
            return self._busy()
        self._reset_after_previous_action()
        payload = self.navigator.skip(self.selected_interviewer)
        self.phase = IntakePhase.SUCCESS_NAVIGATED
        return IntakeOutcome(phase=self.phase, payload=payload)

    def _reset_after_previous_action(self):
        if self.phase in (IntakePhase.FAILED, IntakePhase.SUCCESS_NAVIGATED):
            self.phase = IntakePhase.IDLE
        self.message = None

    def _busy(self) -> IntakeOutcome:
        log_warn("Submission rejected while another one is in progress")
        return IntakeOutcome(phase=self.phase, message=BUSY_MESSAGE)

    def _inline(self, message: str) -> IntakeOutcome:
        self.message = message
        return IntakeOutcome(phase=self.phase, message=message)

    def _run(self, submission, error_prefix: str) -> IntakeOutcome:
        self.phase = IntakePhase.SUBMITTING
        try:
            final_state = self.workflow.invoke(IntakeState(
                submission=submission,
                selected_interviewer=self.selected_interviewer,
                bearer_token=resolve_bearer_token(*self.token_stores),
            ))
        except Exception as e:
            log_error(f"{error_prefix}: {e}", stack_trace=True)
            return self._fail(f"{error_prefix}: Something went wrong")
        finally:
            # An interrupted run must not leave the screen locked
            if self.phase == IntakePhase.SUBMITTING:
                self.phase = IntakePhase.IDLE

        if final_state.payload is None:
            return self._fail(final_state.error or f"{error_prefix}: Something went wrong")

        self.phase = IntakePhase.SUCCESS_NAVIGATED
        return IntakeOutcome(phase=self.phase, payload=final_state.payload)

    def _fail(self, message: str) -> IntakeOutcome:
        self.phase = IntakePhase.FAILED
        self.message = message
        return IntakeOutcome(phase=self.phase, message=message)
