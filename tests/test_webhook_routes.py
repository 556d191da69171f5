"""Tests for the Slack webhook route."""
import hmac
import hashlib
import json
import time
from pathlib import Path
import pytest
from fastapi.testclient import TestClient
import config
from app import app

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(config, "driver_config", lambda: {"slack_token": "Foo"})
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_url_verification(client):
    response = client.post("/webhook/slack", json={"type": "url_verification", "challenge": "abc123"})
    assert response.status_code == 200
    assert response.json() == {"challenge": "abc123"}


def test_message_event(client):
    body = {"event": {"type": "message", "user": "U0X12345", "channel": "general", "text": "Hi"}}
    response = client.post("/webhook/slack", json=body)
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "messages": 1}


def test_bot_event_is_ignored(client):
    body = {"event": {"user": "U0X12345", "bot_id": "B1", "text": "Hi"}}
    response = client.post("/webhook/slack", json=body)
    assert response.json() == {"status": "ok"}


def test_foreign_event_is_ignored(client):
    response = client.post("/webhook/slack", json={"event": {"text": "Hi"}})
    assert response.json() == {"status": "ok"}


def test_interactive_payload(client):
    payload = (FIXTURES / "payload.json").read_text()
    response = client.post("/webhook/slack", data={"payload": payload})
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "messages": 1}


def test_malformed_json_is_bad_request(client):
    response = client.post(
        "/webhook/slack",
        content=b"{not json",
        headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400


def test_signature_required_when_secret_configured(monkeypatch):
    secret = "s3cr3t"
    monkeypatch.setattr(config, "driver_config", lambda: {"slack_signing_secret": secret})
    client = TestClient(app)
    body = json.dumps({"event": {"user": "U0X12345", "text": "Hi"}}).encode()

    response = client.post("/webhook/slack", content=body, headers={"Content-Type": "application/json"})
    assert response.status_code == 401

    timestamp = str(int(time.time()))
    signature = "v0=" + hmac.new(
        secret.encode(), b"v0:" + timestamp.encode() + b":" + body, hashlib.sha256
    ).hexdigest()
    response = client.post("/webhook/slack", content=body, headers={
        "Content-Type": "application/json",
        "X-Slack-Signature": signature,
        "X-Slack-Request-Timestamp": timestamp,
    })
    assert response.status_code == 200


def test_non_ascii_signature_is_unauthorized(monkeypatch):
    monkeypatch.setattr(config, "driver_config", lambda: {"slack_signing_secret": "s3cr3t"})
    client = TestClient(app)
    response = client.post("/webhook/slack", json={"event": {"user": "U0X12345", "text": "Hi"}}, headers={
        "X-Slack-Signature": "v0=é".encode("latin-1"),
        "X-Slack-Request-Timestamp": str(int(time.time())),
    })
    assert response.status_code == 401
