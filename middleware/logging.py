"""Structured request logging."""
import uuid
import json
import logging
from typing import Dict, Any
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    """Configure root logging once at startup."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def log_request(
    request_id: str,
    user_id: str,
    platform: str,
    message: str,
    channel_id: str = None,
    metadata: Dict[str, Any] = None
):
    """
    Log an inbound message with structured data.

    Args:
        request_id: Unique request ID
        user_id: User ID
        platform: Platform name
        message: User message
        channel_id: Channel ID (optional)
        metadata: Additional metadata
    """
    log_data = {
        "request_id": request_id,
        "user_id": user_id,
        "platform": platform,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    if channel_id:
        log_data["channel_id"] = channel_id

    if metadata:
        log_data["metadata"] = metadata

    logger.info(json.dumps(log_data, ensure_ascii=False))


def generate_request_id() -> str:
    """Generate unique request ID."""
    return str(uuid.uuid4())
