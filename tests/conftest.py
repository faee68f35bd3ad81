"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager
from services.pending_changes import PendingChangeStore


class RecordingWriter:
    """File writer that keeps written documents in memory."""

    def __init__(self) -> None:
        self.files: dict[str, str] = {}
        self.fail_with: Exception | None = None

    def __call__(self, file_path: str, content: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.files[file_path] = content


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def store(writer: RecordingWriter) -> PendingChangeStore:
    return PendingChangeStore(writer=writer)


@pytest.fixture
def config_manager(tmp_path, monkeypatch) -> ConfigManager:
    monkeypatch.setenv("NOTE_REVIEW_CONFIG_DIR", str(tmp_path / "config"))
    ConfigManager.reset_instance()
    manager = ConfigManager.get_instance()
    yield manager
    ConfigManager.reset_instance()


@pytest.fixture
def client(config_manager, store) -> TestClient:
    from main import app

    PendingChangeStore._instance = store
    yield TestClient(app)
    PendingChangeStore.reset_instance()
