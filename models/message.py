"""Normalized inbound message and conversation answer."""
from typing import Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A single inbound message, independent of the chat platform."""
    model_config = ConfigDict(frozen=True)

    text: str = Field("", description="Message text, empty for bot-authored events")
    user_id: str = Field("", description="Sender user ID")
    channel_id: str = Field("", description="Channel or conversation ID")
    payload: Dict[str, Any] = Field(default_factory=dict, description="Raw platform event")


class Answer(BaseModel):
    """A user's reply to a previously posted question."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    value: str = ""
    callback_id: Optional[str] = None
    interactive: bool = False

    @classmethod
    def create(
        cls,
        text: Optional[str],
        value: Optional[str] = None,
        callback_id: Optional[str] = None,
        interactive: bool = False
    ) -> "Answer":
        """
        Build an answer, using the text as value when no value is given.

        Args:
            text: Human readable answer text
            value: Machine value of the chosen option
            callback_id: Callback ID of the answered question
            interactive: Whether the answer came from a button click

        Returns:
            Answer
        """
        text = text or ""
        return cls(
            text=text,
            value=text if value is None else value,
            callback_id=callback_id,
            interactive=interactive
        )
