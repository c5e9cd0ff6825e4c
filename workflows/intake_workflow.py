from langgraph.graph import StateGraph, START, END
from schemas.base import IntakeState
from services.parsing_client import ParsingClient
from tools.content_extractor import extract
from tools.exceptions import ExtractionError
from workflows.navigator import Navigator
from logger.logger import log_info, log_debug, log_error

FILE_FAILED_MESSAGE = "Failed to process the job description file. Please try again."
TEXT_FAILED_MESSAGE = "Failed to process the job description text. Please try again."
EMPTY_DOCUMENT_MESSAGE = "Error processing file: no text could be extracted from the document."


class IntakeWorkflow:
    """extract_content (files only) -> parse_description -> navigate"""

    def __init__(self, client: ParsingClient, navigator: Navigator):
        self.client = client
        self.navigator = navigator
        self.graph = StateGraph(IntakeState)

        self._build_graph()
        self.workflow = self.graph.compile()
        log_debug("Intake graph built and compiled")

    def _build_graph(self):
        self.graph.add_node("extract_content", self.extract_content)
        self.graph.add_node("parse_description", self.parse_description)
        self.graph.add_node("navigate", self.navigate)

        self.graph.add_conditional_edges(
            START,
            self._route_submission,
            {"file": "extract_content", "text": "parse_description"}
        )
        self.graph.add_conditional_edges(
            "extract_content",
            self._stop_on_error,
            {"continue": "parse_description", "stop": END}
        )
        self.graph.add_conditional_edges(
            "parse_description",
            self._stop_on_error,
            {"continue": "navigate", "stop": END}
        )
        self.graph.add_edge("navigate", END)

    @staticmethod
    def _route_submission(state: IntakeState) -> str:
        return state.submission.kind

    @staticmethod
    def _stop_on_error(state: IntakeState) -> str:
        return "stop" if state.error else "continue"

    def extract_content(self, state: IntakeState) -> dict:
        try:
            text = extract(state.submission)
        except ExtractionError as e:
            return {"error": f"Error processing file: {e}"}
        if not text.strip():
            # Scanned or empty documents must not reach the parser
            log_info("No text extracted from document", filename=state.submission.filename)
            return {"error": EMPTY_DOCUMENT_MESSAGE}
        return {"job_description": text}

    def parse_description(self, state: IntakeState) -> dict:
        if state.job_description is None:
            job_description = state.submission.content
        else:
            job_description = state.job_description

        result = self.client.submit(job_description, state.bearer_token)
        update = {"job_description": job_description, "parse_result": result}
        if not result.success:
            fallback = FILE_FAILED_MESSAGE if state.submission.kind == "file" else TEXT_FAILED_MESSAGE
            update["error"] = result.message or fallback
        return update

    def navigate(self, state: IntakeState) -> dict:
        payload = self.navigator.to_setup(
            state.parse_result,
            state.selected_interviewer,
            state.job_description,
        )
        return {"payload": payload}

    def invoke(self, initial_state: IntakeState) -> IntakeState:
        log_info("Intake workflow started", kind=initial_state.submission.kind)
        result = self.workflow.invoke(initial_state)
        if isinstance(result, IntakeState):
            return result

        if not isinstance(result, dict):
            log_error(f"Unexpected result type: {type(result)}")
            raise TypeError(f"Unexpected intake workflow result: {type(result)}")

        final_state = IntakeState(**result)
        log_debug("Intake workflow finished", navigated=final_state.payload is not None, error=final_state.error)
        return final_state
