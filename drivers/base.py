"""Base driver interface."""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List, Union, Mapping, Protocol
from models.message import Message, Answer
from models.question import Question


class PayloadError(ValueError):
    """Raised when an inbound request carries malformed JSON."""


class WebhookRequest(Protocol):
    """Inbound request as seen by a driver."""

    def get_content(self) -> bytes:
        ...

    def get(self, key: str) -> Optional[Any]:
        ...


class HttpClient(Protocol):
    """Outbound HTTP capability used for replies."""

    def post(self, url: str, headers: Dict[str, str], body: Dict[str, Any]) -> Any:
        ...


class Driver(ABC):
    """Abstract interface of a chat platform driver."""

    @abstractmethod
    def matches_request(self) -> bool:
        """
        Check whether the request belongs to this platform.

        Returns:
            True if the payload can be turned into a message
        """
        pass

    @abstractmethod
    def get_messages(self) -> List[Message]:
        """
        Extract the normalized messages of the request.

        Returns:
            List of messages, empty if the request carries no event
        """
        pass

    @abstractmethod
    def is_bot(self) -> bool:
        """Check whether the sender is an automated agent."""
        pass

    @abstractmethod
    def get_conversation_answer(self) -> Answer:
        """Extract the answer to a previously posted question."""
        pass

    @abstractmethod
    def reply(
        self,
        content: Union[str, Question],
        origin_message: Message,
        extra_parameters: Optional[Mapping[str, Any]] = None
    ) -> None:
        """
        Send a reply to the channel the origin message came from.

        Args:
            content: Reply text or question
            origin_message: Message being answered
            extra_parameters: Platform parameters merged over the payload
        """
        pass

    @abstractmethod
    def verify_signature(self, request_body: bytes, signature: str, timestamp: str) -> bool:
        """
        Verify webhook signature.

        Args:
            request_body: Raw request body
            signature: Signature header value
            timestamp: Request timestamp header value

        Returns:
            True if signature is valid
        """
        pass
