"""
Test Configuration and Fixtures
"""
import io
import json
import fitz
import docx
import pytest
import requests
from logger.logger import LogManager
from schemas.jd import ParseResult
from workflows.intake_surface import IntakeSurface
from workflows.intake_workflow import IntakeWorkflow
from workflows.navigator import Navigator


@pytest.fixture(scope='session', autouse=True)
def configure_logging():
    LogManager().configure(debug=True, mongo=False)


def build_pdf(pages):
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def build_docx(paragraphs):
    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def pdf_bytes():
    return build_pdf


@pytest.fixture
def docx_bytes():
    return build_docx


class FakeSession:
    """Stands in for requests.Session; replies with a response or raises"""

    def __init__(self, reply=None):
        self.reply = reply
        self.calls = []

    def post(self, url, json=None, headers=None):
        self.calls.append({"url": url, "json": json, "headers": headers or {}})
        if isinstance(self.reply, BaseException):
            raise self.reply
        return self.reply


@pytest.fixture
def fake_session():
    return FakeSession


class RecordingClient:
    """Parsing client double that records what it was asked to parse"""

    def __init__(self, result=None):
        self.result = result or ParseResult.succeeded({"jobName": "Backend Engineer", "tags": ["go"]})
        self.calls = []
        self.on_submit = None

    def submit(self, text, bearer_token=None):
        self.calls.append((text, bearer_token))
        if self.on_submit is not None:
            self.on_submit()
        return self.result


@pytest.fixture
def client():
    return RecordingClient()


@pytest.fixture
def session_store():
    return {}


@pytest.fixture
def handoffs():
    return []


@pytest.fixture
def navigator(session_store, handoffs):
    return Navigator(session_store, handoff=handoffs.append)


@pytest.fixture
def surface(client, navigator):
    intake = IntakeSurface(
        IntakeWorkflow(client, navigator),
        navigator,
        selected_interviewer={"id": 7, "name": "Ada"},
    )
    intake.start_session()
    return intake


@pytest.fixture
def http_response():
    return build_response
