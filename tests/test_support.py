"""
Settings and logging tests
"""
import logging
from config.settings import Settings
from logger import logger as logger_module
from logger.logger import LogManager, log_info


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("API_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.API_URL == "http://localhost:8081"
        assert settings.LOG_TO_MONGO is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("API_URL", "https://api.example.com/")

        assert Settings(_env_file=None).API_URL == "https://api.example.com"


class FakeCollection:
    def __init__(self):
        self.documents = []

    def insert_one(self, document):
        self.documents.append(document)


class FakeMongoClient:
    collection = FakeCollection()

    def __init__(self, uri):
        self.uri = uri

    def __getitem__(self, name):
        return {"intake_logs": self.collection}


class TestLogManager:

    def test_singleton(self):
        assert LogManager() is LogManager()

    def test_session_id_lifecycle(self):
        session_id = LogManager.set_session_id("abc")
        assert LogManager.get_session_id() == "abc" == session_id

        LogManager.clear_session_id()
        assert LogManager.get_session_id() != "abc"

    def test_mongo_handler_receives_entries(self, monkeypatch):
        monkeypatch.setattr(logger_module, "MongoClient", FakeMongoClient)
        FakeMongoClient.collection = FakeCollection()
        settings = Settings(LOG_TO_MONGO=True, LOG_COLLECTION="intake_logs", _env_file=None)

        try:
            LogManager().configure(debug=True, settings=settings)
            log_info("Parsed job description", session_id="s-1", job_name="SRE")
        finally:
            LogManager().configure(debug=True, mongo=False)

        entry = FakeMongoClient.collection.documents[-1]
        assert entry["message"] == "Parsed job description"
        assert entry["session_id"] == "s-1"
        assert entry["metadata"] == {"job_name": "SRE"}
        assert entry["level"] == logging.getLevelName(logging.INFO)
