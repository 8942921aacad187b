"""Shared test fixtures."""

import base64
from datetime import date, datetime, timezone

import pytest

from signkit.config import Settings
from signkit.transport.base import Transport, TransportResponse

DOCUMENT_ID = "550e8400-e29b-41d4-a716-446655440000"
SIGNER_ID = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
ENVELOPE_ID = "f47ac10b-58cc-4372-a567-0e02b2c3d479"


def make_payload(size: int = 2048, mime_type: str | None = None) -> str:
    """Base64 payload of ``size`` decoded bytes, optionally as a data URI."""
    raw = b"%PDF-1.4\n" + b"0" * max(size - 9, 0)
    encoded = base64.b64encode(raw[:size]).decode("ascii")
    if mime_type:
        return f"data:{mime_type};base64,{encoded}"
    return encoded


def years_ago(years: int, today: date | None = None) -> date:
    today = today or datetime.now(timezone.utc).date()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # Feb 29 on a non-leap target year
        return today.replace(year=today.year - years, day=28)


class RecordingTransport(Transport):
    """Fake transport that records requests and replays canned replies."""

    def __init__(self, responses: list[TransportResponse] | None = None):
        self.responses = list(responses or [])
        self.requests: list[dict] = []

    def request(self, method, url, payload, headers):
        self.requests.append(
            {"method": method, "url": url, "payload": payload, "headers": headers}
        )
        if self.responses:
            return self.responses.pop(0)
        return TransportResponse(status_code=200, body="{}")

    @property
    def last(self) -> dict:
        return self.requests[-1]


@pytest.fixture
def document_id():
    return DOCUMENT_ID


@pytest.fixture
def signer_id():
    return SIGNER_ID


@pytest.fixture
def envelope_id():
    return ENVELOPE_ID


@pytest.fixture
def pdf_payload():
    return make_payload


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        base_url="https://api.test",
        api_version="v3",
        access_token="test-token",
    )


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def make_transport():
    return RecordingTransport


@pytest.fixture
def birthday():
    return years_ago
