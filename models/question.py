"""Outgoing structured prompts with selectable buttons."""
from typing import Dict, Any, Optional, List, Iterable
from pydantic import BaseModel, ConfigDict, model_validator

DEFAULT_BUTTON_NAME = "answer"


class Button(BaseModel):
    """A selectable option of a question."""
    model_config = ConfigDict(frozen=True)

    text: str
    value: Optional[str] = None
    name: Optional[str] = None
    image_url: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def resolve_defaults(cls, data: Any) -> Any:
        """Fill value from text and name from the default field name."""
        if isinstance(data, dict):
            data = dict(data)
            if data.get("value") is None:
                data["value"] = data.get("text")
            if data.get("name") is None:
                data["name"] = DEFAULT_BUTTON_NAME
        return data

    @classmethod
    def create(
        cls,
        text: str,
        value: Optional[str] = None,
        name: Optional[str] = None,
        image_url: Optional[str] = None
    ) -> "Button":
        """Create a button labelled with text."""
        return cls(text=text, value=value, name=name, image_url=image_url)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the attachment action shape."""
        return {
            "name": self.name,
            "text": self.text,
            "image_url": self.image_url,
            "type": "button",
            "value": self.value,
        }


class Question(BaseModel):
    """A prompt with an ordered list of buttons."""
    model_config = ConfigDict(frozen=True)

    text: str
    fallback: Optional[str] = None
    callback_id: Optional[str] = None
    buttons: List[Button] = []

    @classmethod
    def create(
        cls,
        text: str,
        fallback: Optional[str] = None,
        callback_id: Optional[str] = None
    ) -> "Question":
        """Create a question without buttons."""
        return cls(text=text, fallback=fallback, callback_id=callback_id)

    def add_button(self, button: Button) -> "Question":
        """Return a copy of this question with one more button."""
        return self.model_copy(update={"buttons": [*self.buttons, button]})

    def add_buttons(self, buttons: Iterable[Button]) -> "Question":
        """Return a copy of this question with the given buttons appended."""
        return self.model_copy(update={"buttons": [*self.buttons, *buttons]})

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the attachment shape."""
        return {
            "text": self.text,
            "fallback": self.fallback,
            "callback_id": self.callback_id,
            "actions": [button.to_dict() for button in self.buttons],
        }
