"""Outbound HTTP client for driver replies."""
import logging
from typing import Dict, Any, Optional
import httpx
import config

logger = logging.getLogger(__name__)


class HttpxClient:
    """Posts form-encoded payloads with httpx."""

    def __init__(self, timeout: Optional[float] = None, transport: Optional[httpx.BaseTransport] = None):
        """Initialize client."""
        self.timeout = config.HTTP_TIMEOUT if timeout is None else timeout
        self.transport = transport

    def post(self, url: str, headers: Dict[str, str], body: Dict[str, Any]) -> httpx.Response:
        """
        Send a POST request.

        Args:
            url: Target URL
            headers: Request headers
            body: Form fields

        Returns:
            Response

        Raises:
            httpx.HTTPError: On transport failure or error status
        """
        data = {key: value for key, value in body.items() if value is not None}
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            response = client.post(url, headers=headers, data=data)
            response.raise_for_status()
        logger.debug(f"POST {url} -> {response.status_code}")
        return response
