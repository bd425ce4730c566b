# backend/tests/conftest.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from complaint_upload.core.config import Settings
from complaint_upload.main import create_app

SETTINGS_ENV_VARS = (
    "ENV",
    "PORT",
    "LOG_LEVEL",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_REGION",
    "S3_BUCKET",
    "S3_ENDPOINT_URL",
    "S3_ADDRESSING_STYLE",
    "UPLOAD_URL_TTL_SEC",
    "UPLOAD_CONTENT_TYPE",
    "UPLOAD_KEY_PREFIX",
    "CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    """Settings from explicit env-style values only (no .env, no process env)."""

    def _make(**env: object) -> Settings:
        values = {
            "AWS_ACCESS_KEY_ID": "testing",
            "AWS_SECRET_ACCESS_KEY": "testing",
            "S3_BUCKET": "cc-complaints-test",
        }
        values.update(env)
        return Settings(_env_file=None, **{k: v for k, v in values.items() if v is not None})

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def client(settings) -> TestClient:
    return TestClient(create_app(settings))


class FailingS3Client:
    """Stands in for a boto3 client whose signing call always fails."""

    def __init__(self, exc: Exception):
        self.exc = exc
        self.calls = 0

    def generate_presigned_url(self, *args, **kwargs):
        self.calls += 1
        raise self.exc


class RecordingS3Client:
    def __init__(self, url: str = "https://signed.example/upload"):
        self.url = url
        self.calls: list[tuple[str, dict, int]] = []

    def generate_presigned_url(self, method, Params, ExpiresIn):
        self.calls.append((method, Params, ExpiresIn))
        return self.url
