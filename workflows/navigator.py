from typing import Any, Callable, MutableMapping, Optional
from schemas.base import NavigationPayload
from schemas.jd import ParseResult
from logger.logger import log_info, log_debug

SETUP_ROUTE = "/interview/setup"
JOB_NAME_KEY = "jobName"
# Derived setup fields that must not leak from one intake session into the next
SESSION_KEYS = ("jobName", "tags", "duration", "softSkillsPercentage", "difficulty")

Handoff = Callable[[NavigationPayload], None]


class Navigator:
    """Moves the user to the interview setup step.

    ``session_store`` is any mutable mapping scoped to the user's session
    (``st.session_state`` in the UI). ``handoff`` receives the payload for the
    setup step.
    """

    def __init__(self, session_store: MutableMapping[str, Any], handoff: Optional[Handoff] = None):
        self.session_store = session_store
        self.handoff = handoff

    def clear_session(self):
        for key in SESSION_KEYS:
            self.session_store.pop(key, None)
        log_debug("Cleared intake session keys", keys=list(SESSION_KEYS))

    def to_setup(self, result: ParseResult, selected_interviewer: Any, job_description: str) -> NavigationPayload:
        # Only jobName goes to session storage; the rest travels with the payload
        self.session_store[JOB_NAME_KEY] = result.job_name_or_empty
        payload = NavigationPayload(
            tags=list(result.tags),
            selected_interviewer=selected_interviewer,
            job_description=job_description,
        )
        return self._go(payload)

    def skip(self, selected_interviewer: Any = None) -> NavigationPayload:
        return self._go(NavigationPayload(selected_interviewer=selected_interviewer, job_description=""))

    def _go(self, payload: NavigationPayload) -> NavigationPayload:
        log_info(f"Navigating to {SETUP_ROUTE}", tags=payload.tags, has_description=bool(payload.job_description))
        if self.handoff is not None:
            self.handoff(payload)
        return payload
