import os

import pytest


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch):
    """Remove INPUT_* variables inherited from the CI environment."""
    for key in list(os.environ):
        if key.startswith("INPUT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("APIM_LOG_LEVEL", raising=False)
    yield


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty working directory (no local ytt binary)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, text="", reason="OK", json_data=None, content=b""):
        self.status_code = status_code
        self.text = text
        self.reason = reason
        self.content = content
        self._json_data = json_data

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json_data is None:
            raise ValueError("No JSON object could be decoded")
        return self._json_data


@pytest.fixture
def fake_response():
    """Factory for FakeResponse objects."""
    return FakeResponse
