from __future__ import annotations

import json
from typing import Any, List, Tuple

import pytest

from gtranslate.client import TranslationClient
from gtranslate.mt_api import TransportError

VALID_KEY = "A" * 39


class RecordingTransport:
    """Transport double that records every call and replays a canned body."""

    def __init__(self, body: Any = None, error: Exception | None = None):
        self.body = body
        self.error = error
        self.calls: List[Tuple[str, str, str]] = []

    def send(self, method: str, url: str, query: str) -> str:
        self.calls.append((method, url, query))
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return json.dumps(self.body)
        return self.body


def translations_body(*entries):
    return {"data": {"translations": list(entries)}}


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(transport):
    return TranslationClient(VALID_KEY, transport=transport)


@pytest.fixture
def failing_transport():
    return RecordingTransport(error=TransportError("HTTP 403: Daily Limit Exceeded", status_code=403))
