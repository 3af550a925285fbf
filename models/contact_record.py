from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContactRecord(BaseModel):
    """Persisted contact shape; JSON keys are camelCase."""

    id: str
    name: str
    phone: str
    category: str = "other"
    notes: str = ""
    added_date: str = Field(alias="addedDate")
    last_contacted: str | None = Field(default=None, alias="lastContacted")
    call_count: int = Field(default=0, ge=0, alias="callCount")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
