from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


ShipmentStatus = Literal["pending", "in-transit", "delivered", "exception"]


class TimelineEvent(BaseModel):
    """One status step in a shipment's tracking history (display strings only)."""

    status: str
    location: str
    date: str
    icon: str

    model_config = ConfigDict(extra="ignore")


class ShipmentRecord(BaseModel):
    """Persisted shipment shape; JSON keys are camelCase."""

    id: str
    tracking_number: str = Field(alias="trackingNumber")
    carrier: str
    # Open on load; unknown values render with the pending badge
    status: str = "pending"
    added_date: str = Field(alias="addedDate")
    estimated_delivery: str = Field(default="", alias="estimatedDelivery")
    timeline: list[TimelineEvent] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
