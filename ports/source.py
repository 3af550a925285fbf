from __future__ import annotations

from datetime import datetime
from typing import List, Protocol

from models.shipment_record import ShipmentStatus, TimelineEvent


class TrackingSourcePort(Protocol):
    source_name: str

    def choose_status(self) -> ShipmentStatus:
        ...

    def estimate_delivery(self, now: datetime) -> str:
        ...

    def generate_timeline(self, status: ShipmentStatus, now: datetime) -> List[TimelineEvent]:
        ...
