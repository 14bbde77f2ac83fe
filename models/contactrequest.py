from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class RelayRequest(BaseModel):
    """Contact form submission as posted by the portfolio page."""
    model_config = ConfigDict(extra="allow")

    email: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "RelayRequest":
        # No schema validation: whatever the body holds is passed through.
        if not isinstance(payload, dict):
            payload = {}
        return cls.model_construct(
            email=payload.get("email"),
            message=payload.get("message"),
        )


class RelayResult(BaseModel):
    message: str
