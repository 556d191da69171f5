"""Inbound request adapter."""
from typing import Dict, Any, Optional, Mapping
from fastapi import Request


class IncomingRequest:
    """Raw webhook body plus its form and query fields."""

    def __init__(
        self,
        content: bytes = b"",
        fields: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None
    ):
        self.content = content
        self.fields: Dict[str, Any] = dict(fields or {})
        self.headers: Dict[str, str] = {k.lower(): v for k, v in (headers or {}).items()}

    @classmethod
    async def from_fastapi(cls, request: Request) -> "IncomingRequest":
        """
        Read a FastAPI request into an IncomingRequest.

        Form fields win over query parameters with the same name.
        """
        content = await request.body()
        fields: Dict[str, Any] = dict(request.query_params)
        content_type = request.headers.get("content-type", "")
        if content_type.startswith("application/x-www-form-urlencoded"):
            form = await request.form()
            fields.update({key: value for key, value in form.items()})
        return cls(content=content, fields=fields, headers=dict(request.headers))

    def get_content(self) -> bytes:
        """Return the raw request body."""
        return self.content

    def get(self, key: str) -> Optional[Any]:
        """Return a form or query field, None if absent."""
        return self.fields.get(key)

    def header(self, name: str, default: str = "") -> str:
        """Return a header value by case-insensitive name."""
        return self.headers.get(name.lower(), default)
