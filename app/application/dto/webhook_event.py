from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebhookEventDTO(BaseModel):
    """GoHighLevel workflow payload.

    Only the blocks the resolver reads are typed; everything else the platform
    sends is kept as extra fields so the full payload can still be logged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    custom_data: dict[str, Any] | None = Field(default=None, alias="customData")
    calendar: dict[str, Any] | None = None
    user: dict[str, Any] | None = None

    contact_id: Any = None
    contact_id_camel: Any = Field(default=None, alias="contactId")
    full_name: Any = None
    email: Any = None
    start_time: Any = Field(default=None, alias="startTime")
    end_time: Any = Field(default=None, alias="endTime")
