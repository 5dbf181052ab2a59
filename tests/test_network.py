import json

import pytest
import requests

from pong_arena.netcodec import ScoreEntry
from pong_client.network import LeaderboardClient, LeaderboardError


class FakeResponse:
    def __init__(self, status_code=200, body=None, raw=None):
        self.status_code = status_code
        if raw is not None:
            self.content = raw
        else:
            self.content = json.dumps(body).encode("utf-8")

    @property
    def ok(self):
        return 200 <= self.status_code < 400


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def _handle(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._handle("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._handle("POST", url, **kwargs)

    def close(self):
        self.closed = True


def make_client(**kwargs):
    session = FakeSession(**kwargs)
    return LeaderboardClient("http://scores.example/api/", session=session, timeout=2), session


def test_fetch_returns_entries():
    client, session = make_client(response=FakeResponse(body=[{"name": "Ann", "score": 9}]))
    assert client.fetch() == [ScoreEntry("Ann", 9)]
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://scores.example/api/scores")
    assert kwargs["timeout"] == 2


def test_fetch_http_error_uses_backend_message():
    client, _ = make_client(response=FakeResponse(500, body={"error": "db down"}))
    with pytest.raises(LeaderboardError, match="db down"):
        client.fetch()


def test_fetch_http_error_without_body():
    client, _ = make_client(response=FakeResponse(404, raw=b"<html>"))
    with pytest.raises(LeaderboardError, match="HTTP 404"):
        client.fetch()


def test_fetch_transport_error():
    client, _ = make_client(error=requests.ConnectionError("refused"))
    with pytest.raises(LeaderboardError):
        client.fetch()


def test_submit_requires_name():
    client, session = make_client(response=FakeResponse(body={}))
    result = client.submit("   ", 10)
    assert not result.ok
    assert result.message == "Please enter your name."
    assert session.calls == []


def test_submit_posts_payload():
    client, session = make_client(response=FakeResponse(body={}))
    result = client.submit(" Ann ", 12)

    assert result.ok
    assert result.message == "Score saved successfully Ann!"
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://scores.example/api/add-score")
    assert json.loads(kwargs["data"]) == {"name": "Ann", "score": 12}
    assert kwargs["headers"]["Content-Type"] == "application/json"


def test_submit_backend_error():
    client, _ = make_client(response=FakeResponse(body={"error": "duplicate"}))
    result = client.submit("Ann", 12)
    assert not result.ok
    assert result.message == "Error saving score!"


@pytest.mark.parametrize("kwargs", [
    {"error": requests.Timeout("slow")},
    {"response": FakeResponse(502, raw=b"Bad gateway")},
])
def test_submit_server_error(kwargs):
    client, _ = make_client(**kwargs)
    result = client.submit("Ann", 12)
    assert not result.ok
    assert result.message == "Server error!"


def test_async_calls_post_to_inbox():
    client, _ = make_client(response=FakeResponse(body=[{"name": "Ann", "score": 9}]))
    client.fetch_async().join(timeout=5)
    assert client.poll() == [{"type": "SCORES", "scores": [ScoreEntry("Ann", 9)]}]
    assert client.poll() == []


def test_async_fetch_failure_is_a_message():
    client, _ = make_client(error=requests.ConnectionError("refused"))
    client.fetch_async().join(timeout=5)
    msgs = client.poll()
    assert len(msgs) == 1 and msgs[0]["type"] == "ERROR"


def test_async_submit():
    client, _ = make_client(response=FakeResponse(body={}))
    client.submit_async("Ann", 3).join(timeout=5)
    assert client.poll() == [{"type": "SUBMITTED", "ok": True, "message": "Score saved successfully Ann!"}]


def test_close_closes_session():
    client, session = make_client(response=FakeResponse(body=[]))
    client.close()
    assert session.closed
