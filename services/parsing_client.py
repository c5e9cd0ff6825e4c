"""HTTP client for the remote job description parser.

``ParsingClient.submit`` always returns a ``ParseResult``: transport and
server failures are folded into ``success=False`` with a user-facing message.
"""
from typing import Any, Dict, Mapping, Optional
import requests
from config.settings import Settings, get_settings
from schemas.jd import ParseResult
from logger.logger import log_debug, log_info, log_warn, log_error

PARSE_ENDPOINT = "/jobs/parse"
TOKEN_KEY = "authToken"

UNPARSABLE_MESSAGE = (
    "The job description uploaded could not be parsed. "
    "Please try again or skip to manual configuration."
)
NO_RESPONSE_MESSAGE = "No response from server. Please try again later."
REQUEST_FAILED_MESSAGE = "An error occurred during job description parsing mechanism. Please try again."


def resolve_bearer_token(*stores: Optional[Mapping[str, Any]], key: str = TOKEN_KEY) -> Optional[str]:
    """First non-empty token, checking the persistent store before the session one"""
    for store in stores:
        if not store:
            continue
        token = store.get(key)
        if token:
            return token
    return None


def persistent_token_store(settings: Optional[Settings] = None) -> Dict[str, str]:
    settings = settings or get_settings()
    return {TOKEN_KEY: settings.AUTH_TOKEN}


def _json_body(response: requests.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class ParsingClient:
    """Stateless client; build one at startup and pass it around."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ParsingClient":
        settings = settings or get_settings()
        return cls(settings.API_URL)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{PARSE_ENDPOINT}"

    def submit(self, text: str, bearer_token: Optional[str] = None) -> ParseResult:
        """Send the job description once; no retry, no timeout override"""
        headers = {}
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"

        log_info("Sending job description to parser", endpoint=self.endpoint, characters=len(text))
        try:
            response = self.session.post(self.endpoint, json={"prompt": text}, headers=headers)

            if not 200 <= response.status_code < 300:
                body = _json_body(response)
                log_warn("Job description parse rejected", status_code=response.status_code, body=body)
                message = body.get("message")
                return ParseResult.failed(str(message) if message else UNPARSABLE_MESSAGE)

            result = ParseResult.succeeded(_json_body(response))
            log_debug("Job description parsed", job_name=result.job_name, tags=result.tags)
            return result

        except (requests.ConnectionError, requests.Timeout) as e:
            log_error("Job description parse error: no response", error=str(e))
            return ParseResult.failed(NO_RESPONSE_MESSAGE)
        except Exception as e:
            log_error("Job description parse error", error=str(e), stack_trace=True)
            return ParseResult.failed(REQUEST_FAILED_MESSAGE)
