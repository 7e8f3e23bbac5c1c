import json
from urllib.parse import parse_qsl, urlsplit

import pytest

from itayki.client import ItaykiClient
from itayki.core import http_client as hc

BASE = "http://mock.itayki.test"


class FakeResponse:
    """Stands in for `requests.Response`: JSON or raw bytes body."""

    def __init__(self, body=None, content=None, status_code=200):
        self.status_code = status_code
        self.content = content if content is not None else json.dumps(body).encode("utf-8")

    def json(self):
        try:
            return json.loads(self.content)
        except (ValueError, UnicodeDecodeError) as e:
            raise hc.requests.JSONDecodeError("Expecting value", "", 0) from e


class FakeApi:
    def __init__(self):
        self.calls = []
        self.response = FakeResponse({})

    def reply(self, body=None, content=None):
        self.response = FakeResponse(body, content)

    def reply_page(self, status_code, content):
        """Real `requests.Response` carrying a non-JSON error page."""
        r = hc.requests.Response()
        r.status_code = status_code
        r._content = content
        r.url = BASE
        self.response = r

    @property
    def path(self):
        return urlsplit(self.calls[-1]).path

    @property
    def query(self):
        return dict(parse_qsl(urlsplit(self.calls[-1]).query))

    def request(self, method, url, timeout=None, headers=None, **kw):
        assert method == "GET"
        self.calls.append(url)
        return self.response


@pytest.fixture
def api(monkeypatch):
    fake = FakeApi()
    monkeypatch.setattr(hc.requests, "request", fake.request)
    return fake


@pytest.fixture
def client():
    return ItaykiClient(base_url=BASE)
