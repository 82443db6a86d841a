"""Base model for all emitted events."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BaseEvent(BaseModel):
    """Common fields carried by every event."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=datetime.now)
    event_type: str = Field(default="base", description="Event type identifier")
