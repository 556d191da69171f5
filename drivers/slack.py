"""Slack platform driver."""
import copy
import hmac
import hashlib
import json
import logging
import time
from typing import Dict, Any, Optional, List, Union, Mapping
from pydantic import BaseModel, ConfigDict
from drivers.base import Driver, HttpClient, PayloadError, WebhookRequest
from models.message import Message, Answer
from models.question import Question

logger = logging.getLogger(__name__)

API_URL = "https://slack.com/api/chat.postMessage"

# Slack rejects signed requests older than five minutes
SIGNATURE_MAX_AGE = 60 * 5


def _decode_json(raw: Union[str, bytes], source: str) -> Dict[str, Any]:
    """Decode a JSON object; anything that is not an object decodes to {}."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayloadError(f"Malformed JSON in {source}: {e}") from e
    return data if isinstance(data, dict) else {}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _nested_id(data: Dict[str, Any], key: str) -> Optional[str]:
    """Read data[key]["id"], None when either level is missing."""
    item = data.get(key)
    if not isinstance(item, dict) or item.get("id") is None:
        return None
    return _as_text(item["id"])


class EventPayload(BaseModel):
    """
    Events API request: JSON body with an "event" object.

    {
        "type": "event_callback",
        "event": {
            "type": "message",
            "user": "U0X12345",
            "channel": "C0X12345",
            "text": "Hi"
        }
    }
    """
    model_config = ConfigDict(frozen=True)

    body: Dict[str, Any]
    event: Dict[str, Any]

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> "EventPayload":
        event = body.get("event")
        return cls(body=body, event=event if isinstance(event, dict) else {})

    @property
    def user_id(self) -> Optional[str]:
        user = self.event.get("user")
        return None if user is None else _as_text(user)

    @property
    def channel_id(self) -> str:
        return _as_text(self.event.get("channel"))

    @property
    def text(self) -> str:
        return _as_text(self.event.get("text"))

    @property
    def is_bot(self) -> bool:
        return "bot_id" in self.event

    @property
    def has_event(self) -> bool:
        return bool(self.event)

    def answer(self) -> Answer:
        return Answer.create(self.text)


class InteractivePayload(BaseModel):
    """
    Interactive message request: JSON in the "payload" form field.

    {
        "actions": [{"name": "answer", "value": "yes", "type": "button"}],
        "callback_id": "question_1",
        "user": {"id": "U045VRZFT", "name": "brautigan"},
        "channel": {"id": "C065W1189", "name": "general"}
    }
    """
    model_config = ConfigDict(frozen=True)

    payload: Dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "InteractivePayload":
        return cls(payload=payload)

    @property
    def user_id(self) -> Optional[str]:
        return _nested_id(self.payload, "user")

    @property
    def channel_id(self) -> str:
        return _as_text(_nested_id(self.payload, "channel"))

    @property
    def text(self) -> str:
        return _as_text(self.payload.get("text"))

    @property
    def is_bot(self) -> bool:
        user = self.payload.get("user")
        return "bot_id" in self.payload or (isinstance(user, dict) and "bot_id" in user)

    @property
    def has_event(self) -> bool:
        return bool(self.payload)

    @property
    def action(self) -> Dict[str, Any]:
        """First action of the click; further actions are ignored."""
        actions = self.payload.get("actions")
        if isinstance(actions, list) and actions and isinstance(actions[0], dict):
            return actions[0]
        return {}

    def answer(self) -> Answer:
        action = self.action
        value = _as_text(action.get("value"))
        label = self.text or _as_text(action.get("text")) or _as_text(action.get("name")) or value
        return Answer.create(
            label,
            value=value,
            callback_id=self.payload.get("callback_id"),
            interactive=True
        )


SlackPayload = Union[EventPayload, InteractivePayload]


def parse_request(request: WebhookRequest) -> SlackPayload:
    """
    Decode a Slack webhook request into one of the two payload variants.

    Interactive requests arrive form-encoded, so the "payload" field is
    probed before the body is read as JSON.

    Raises:
        PayloadError: If the body or the payload field is malformed JSON
    """
    raw_payload = request.get("payload")
    if raw_payload is not None:
        return InteractivePayload.from_payload(_decode_json(raw_payload, "payload field"))

    content = request.get_content() or b""
    body = _decode_json(content, "request body") if content.strip() else {}
    return EventPayload.from_body(body)


class SlackDriver(Driver):
    """Slack Events API and interactive message driver."""

    name = "slack"

    def __init__(self, request: WebhookRequest, config: Mapping[str, Any], http_client: HttpClient):
        """
        Initialize Slack driver.

        Args:
            request: Inbound webhook request
            config: Driver settings (slack_token, slack_signing_secret)
            http_client: Client used to post replies

        Raises:
            PayloadError: If the request carries malformed JSON
        """
        self.config = dict(config)
        self.http = http_client
        self.payload: SlackPayload = parse_request(request)

    def matches_request(self) -> bool:
        """Check the request carries a Slack user ID."""
        return self.payload.user_id is not None

    def get_messages(self) -> List[Message]:
        """Extract the message of the request."""
        if not self.payload.has_event:
            return []

        # Bot-authored events carry no usable text
        text = "" if self.is_bot() else self.payload.text
        raw = self.payload.event if isinstance(self.payload, EventPayload) else self.payload.payload
        return [
            Message(
                text=text,
                user_id=_as_text(self.payload.user_id),
                channel_id=self.payload.channel_id,
                payload=copy.deepcopy(raw)
            )
        ]

    def is_bot(self) -> bool:
        """Check whether the event was sent by a bot."""
        return self.payload.is_bot

    def get_conversation_answer(self) -> Answer:
        """Extract the answer from the event text or the clicked button."""
        return self.payload.answer()

    def url_verification_challenge(self) -> Optional[str]:
        """
        Return the challenge of an Events API URL verification request.

        Returns:
            Challenge if this is a verification request, None otherwise
        """
        if not isinstance(self.payload, EventPayload):
            return None
        if self.payload.body.get("type") != "url_verification":
            return None
        challenge = self.payload.body.get("challenge")
        return None if challenge is None else _as_text(challenge)

    def build_reply_payload(
        self,
        content: Union[str, Question],
        origin_message: Message,
        extra_parameters: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Build the chat.postMessage fields for a reply.

        Extra parameters are merged last and overwrite any base field.
        """
        payload: Dict[str, Any] = {
            "token": self.config.get("slack_token"),
            "channel": origin_message.channel_id,
        }
        if isinstance(content, Question):
            payload["text"] = ""
            payload["attachments"] = json.dumps([content.to_dict()], separators=(",", ":"))
        else:
            payload["text"] = content

        payload.update(extra_parameters or {})
        return payload

    def reply(
        self,
        content: Union[str, Question],
        origin_message: Message,
        extra_parameters: Optional[Mapping[str, Any]] = None
    ) -> None:
        """
        Post a reply to the origin message's channel.

        Raises:
            httpx.HTTPError: Transport failures of the HTTP client propagate
        """
        payload = self.build_reply_payload(content, origin_message, extra_parameters)
        logger.info(f"[Slack] Sending reply to channel {payload.get('channel')}")
        self.http.post(API_URL, {}, payload)

    def verify_signature(self, request_body: bytes, signature: str, timestamp: str) -> bool:
        """
        Verify Slack request signature.

        Args:
            request_body: Raw request body
            signature: X-Slack-Signature header value
            timestamp: X-Slack-Request-Timestamp header value

        Returns:
            True if signature is valid
        """
        secret = self.config.get("slack_signing_secret")
        if not secret:
            return True  # Skip verification if no secret configured

        if not signature or not timestamp:
            return False

        try:
            age = abs(time.time() - int(timestamp))
        except ValueError:
            logger.warning(f"Invalid Slack request timestamp: {timestamp!r}")
            return False
        if age > SIGNATURE_MAX_AGE:
            logger.warning("Stale Slack request timestamp")
            return False

        base = b"v0:" + timestamp.encode() + b":" + request_body
        expected_signature = "v0=" + hmac.new(secret.encode(), base, hashlib.sha256).hexdigest()
        return hmac.compare_digest(expected_signature.encode(), signature.encode("utf-8", "surrogateescape"))
