"""
Parsing client tests
"""
import pytest
import requests
from pydantic import ValidationError
from services.parsing_client import (
    ParsingClient,
    resolve_bearer_token,
    persistent_token_store,
    NO_RESPONSE_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    UNPARSABLE_MESSAGE,
)
from config.settings import Settings


class TestRequest:

    def test_posts_prompt_to_parse_endpoint(self, fake_session, http_response):
        session = fake_session(http_response(200, {}))
        client = ParsingClient("http://api.example.com/", session=session)

        client.submit("Backend engineer, Go", bearer_token="tok-123")

        call = session.calls[0]
        assert call["url"] == "http://api.example.com/jobs/parse"
        assert call["json"] == {"prompt": "Backend engineer, Go"}
        assert call["headers"] == {"Authorization": "Bearer tok-123"}

    @pytest.mark.parametrize("token", [None, ""])
    def test_no_authorization_header_without_token(self, fake_session, http_response, token):
        session = fake_session(http_response(200, {}))

        ParsingClient("http://api.example.com", session=session).submit("text", bearer_token=token)

        assert "Authorization" not in session.calls[0]["headers"]

    def test_single_attempt_on_failure(self, fake_session):
        session = fake_session(requests.ConnectionError("refused"))

        ParsingClient("http://api.example.com", session=session).submit("text")

        assert len(session.calls) == 1


class TestSuccess:

    def test_body_merged_with_success(self, fake_session, http_response):
        body = {"jobName": "Backend Engineer", "tags": ["go", "distributed-systems"]}
        client = ParsingClient("http://api", session=fake_session(http_response(200, body)))

        result = client.submit("text")

        assert result.success is True
        assert result.job_name == "Backend Engineer"
        assert result.tags == ["go", "distributed-systems"]
        assert result.model_dump(by_alias=True, exclude_none=True) == {
            "jobName": "Backend Engineer",
            "tags": ["go", "distributed-systems"],
            "success": True,
        }

    def test_missing_fields_tolerated(self, fake_session, http_response):
        client = ParsingClient("http://api", session=fake_session(http_response(201)))

        result = client.submit("text")

        assert result.success is True
        assert result.job_name_or_empty == ""
        assert result.tags == []

    def test_extra_fields_kept(self, fake_session, http_response):
        body = {"jobName": "SRE", "tags": None, "domain": "infrastructure", "success": False}
        client = ParsingClient("http://api", session=fake_session(http_response(200, body)))

        result = client.submit("text")

        assert result.success is True
        assert result.tags == []
        assert result.model_extra["domain"] == "infrastructure"

    def test_numeric_job_name_kept_as_text(self, fake_session, http_response):
        client = ParsingClient("http://api", session=fake_session(http_response(200, {"jobName": 42, "tags": ["go"]})))

        result = client.submit("text")

        assert result.success is True
        assert result.job_name == "42"

    def test_result_is_immutable(self, fake_session, http_response):
        client = ParsingClient("http://api", session=fake_session(http_response(200, {})))
        result = client.submit("text")

        with pytest.raises(ValidationError):
            result.success = False


class TestFailures:

    def test_server_message_used(self, fake_session, http_response):
        client = ParsingClient("http://api", session=fake_session(http_response(422, {"message": "unparsable"})))

        result = client.submit("text")

        assert result.success is False
        assert result.message == "unparsable"

    @pytest.mark.parametrize("body", [None, {}, {"message": ""}, ["not", "an", "object"]])
    def test_fallback_message(self, fake_session, http_response, body):
        client = ParsingClient("http://api", session=fake_session(http_response(500, body)))

        result = client.submit("text")

        assert result.success is False
        assert result.message == UNPARSABLE_MESSAGE

    @pytest.mark.parametrize("error", [
        requests.ConnectionError("connection refused"),
        requests.Timeout("read timed out"),
    ])
    def test_no_response(self, fake_session, error):
        client = ParsingClient("http://api", session=fake_session(error))

        result = client.submit("text")

        assert result.success is False
        assert result.message == "No response from server. Please try again later."
        assert result.message == NO_RESPONSE_MESSAGE

    def test_request_not_sent(self):
        # No scheme: requests refuses to build the request
        result = ParsingClient("not-a-url").submit("text")

        assert result.success is False
        assert result.message == REQUEST_FAILED_MESSAGE

    def test_unexpected_error_does_not_escape(self, fake_session):
        client = ParsingClient("http://api", session=fake_session(RuntimeError("boom")))

        result = client.submit("text")

        assert result.success is False
        assert result.message == REQUEST_FAILED_MESSAGE


class TestBearerToken:

    def test_persistent_store_wins(self):
        assert resolve_bearer_token({"authToken": "persisted"}, {"authToken": "session"}) == "persisted"

    def test_empty_values_skipped(self):
        assert resolve_bearer_token({"authToken": ""}, {"authToken": "session"}) == "session"

    def test_none_when_no_token(self):
        assert resolve_bearer_token({}, None, {"authToken": None}) is None

    def test_persistent_store_from_settings(self):
        settings = Settings(AUTH_TOKEN="from-env", _env_file=None)

        assert persistent_token_store(settings) == {"authToken": "from-env"}

    def test_client_from_settings(self):
        settings = Settings(API_URL="http://parser.internal:9000/", _env_file=None)

        assert ParsingClient.from_settings(settings).endpoint == "http://parser.internal:9000/jobs/parse"
