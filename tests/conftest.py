import json

import pytest
import requests

from kavenegar import KavenegarAPI

API_KEY = "4E5A6B7C8D9E0F1A2B3C"


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.status_code = status_code
        self._body = body

    def json(self):
        if isinstance(self._body, (bytes, str)):
            return json.loads(self._body)
        return self._body


class FakeSession:
    """Records POSTs and replays queued responses or exceptions."""

    def __init__(self):
        self.calls = []
        self.queue = []
        self.closed = False

    def reply(self, entries=None, status=200, message="تایید شد", http_status=200):
        self.queue.append(FakeResponse({"return": {"status": status, "message": message}, "entries": entries}, http_status))

    def reply_raw(self, body, http_status=200):
        self.queue.append(FakeResponse(body, http_status))

    def fail(self, exc):
        self.queue.append(exc)

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        item = self.queue.pop(0) if self.queue else FakeResponse({"return": {"status": 200, "message": "ok"}, "entries": []})
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api(session):
    return KavenegarAPI(API_KEY, session=session)


@pytest.fixture
def connection_refused():
    return requests.exceptions.ConnectionError("Connection refused")
