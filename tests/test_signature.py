"""Tests for Slack request signature verification."""
import hmac
import hashlib
import time
from unittest.mock import MagicMock
from drivers.request import IncomingRequest
from drivers.slack import SlackDriver

SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
BODY = b'{"event": {"user": "U0X12345", "text": "hi"}}'


def sign(body: bytes, timestamp: str, secret: str = SECRET) -> str:
    base = b"v0:" + timestamp.encode() + b":" + body
    return "v0=" + hmac.new(secret.encode(), base, hashlib.sha256).hexdigest()


def get_driver(config):
    return SlackDriver(IncomingRequest(content=BODY), config, MagicMock())


def test_skips_verification_without_secret():
    assert get_driver({}).verify_signature(BODY, "", "") is True


def test_accepts_valid_signature():
    timestamp = str(int(time.time()))
    driver = get_driver({"slack_signing_secret": SECRET})
    assert driver.verify_signature(BODY, sign(BODY, timestamp), timestamp) is True


def test_rejects_wrong_secret():
    timestamp = str(int(time.time()))
    driver = get_driver({"slack_signing_secret": SECRET})
    assert driver.verify_signature(BODY, sign(BODY, timestamp, "other"), timestamp) is False


def test_rejects_missing_headers():
    driver = get_driver({"slack_signing_secret": SECRET})
    assert driver.verify_signature(BODY, "", "") is False


def test_rejects_stale_timestamp():
    timestamp = str(int(time.time()) - 60 * 10)
    driver = get_driver({"slack_signing_secret": SECRET})
    assert driver.verify_signature(BODY, sign(BODY, timestamp), timestamp) is False


def test_rejects_invalid_timestamp():
    driver = get_driver({"slack_signing_secret": SECRET})
    assert driver.verify_signature(BODY, "v0=abc", "yesterday") is False


def test_rejects_non_ascii_signature():
    timestamp = str(int(time.time()))
    driver = get_driver({"slack_signing_secret": SECRET})
    assert driver.verify_signature(BODY, "v0=é", timestamp) is False
