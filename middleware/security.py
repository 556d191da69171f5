"""Security middleware for webhook verification."""
from fastapi import HTTPException, status
from drivers.base import Driver
from drivers.request import IncomingRequest

SIGNATURE_HEADER = "X-Slack-Signature"
TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"


def verify_webhook_signature(request: IncomingRequest, driver: Driver) -> bool:
    """
    Verify webhook signature.

    Args:
        request: Inbound request
        driver: Driver built for the request

    Returns:
        True if verified, raises HTTPException if not
    """
    signature = request.header(SIGNATURE_HEADER)
    timestamp = request.header(TIMESTAMP_HEADER)

    if not driver.verify_signature(request.get_content(), signature, timestamp):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid signature"
        )

    return True
