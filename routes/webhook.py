"""Webhook routes for chat platforms."""
from fastapi import APIRouter, Request, HTTPException, status
import config
from drivers.base import PayloadError
from drivers.http import HttpxClient
from drivers.request import IncomingRequest
from drivers.slack import SlackDriver
from middleware.logging import log_request, generate_request_id
from middleware.security import verify_webhook_signature

router = APIRouter()

# Outbound client shared by request-scoped drivers
http_client = HttpxClient()


@router.post("/webhook/slack")
async def slack_webhook(request: Request):
    """Slack Events API and interactive message handler (POST)."""
    request_id = generate_request_id()
    incoming = await IncomingRequest.from_fastapi(request)

    try:
        driver = SlackDriver(incoming, config.driver_config(), http_client)
    except PayloadError as e:
        log_request(request_id, "unknown", SlackDriver.name, "", metadata={"error": str(e)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    verify_webhook_signature(incoming, driver)

    # Events API URL verification handshake
    challenge = driver.url_verification_challenge()
    if challenge is not None:
        return {"challenge": challenge}

    if not driver.matches_request() or driver.is_bot():
        return {"status": "ok"}  # Ignore non-message and bot events

    answer = driver.get_conversation_answer()
    messages = driver.get_messages()
    for message in messages:
        metadata = {"answer": answer.value, "callback_id": answer.callback_id} if answer.interactive else None
        log_request(
            request_id,
            message.user_id,
            SlackDriver.name,
            message.text,
            channel_id=message.channel_id,
            metadata=metadata
        )

    return {"status": "ok", "messages": len(messages)}
