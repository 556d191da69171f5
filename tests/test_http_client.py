"""Tests for HttpxClient."""
from urllib.parse import parse_qs
import httpx
import pytest
from drivers.http import HttpxClient
from drivers.slack import API_URL


def test_posts_form_encoded_body():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["body"] = parse_qs(request.content.decode())
        return httpx.Response(200, json={"ok": True})

    client = HttpxClient(timeout=1, transport=httpx.MockTransport(handler))
    response = client.post(API_URL, {}, {"token": "Foo", "channel": "general", "text": "Test", "icon_emoji": None})

    assert response.status_code == 200
    assert captured["url"] == API_URL
    assert captured["body"] == {"token": ["Foo"], "channel": ["general"], "text": ["Test"]}


def test_raises_on_error_status():
    client = HttpxClient(timeout=1, transport=httpx.MockTransport(lambda request: httpx.Response(500)))
    with pytest.raises(httpx.HTTPStatusError):
        client.post(API_URL, {}, {"text": "Test"})
