from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import List, Optional

from models.shipment_record import ShipmentStatus, TimelineEvent
from services.date_format import short_day, short_datetime
from sources.base import EVENT_STAGES, HOURS_BETWEEN_EVENTS, INITIAL_STATUSES, LOCATIONS, timeline_length
from sources.registry import register


@register("mock")
class MockCarrierSource:
    """Random status/timeline generator standing in for a carrier API.

    Pass ``seed`` (or a ready ``rng``) for reproducible output.
    """

    source_name = "mock"

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random(seed)

    def choose_status(self) -> ShipmentStatus:
        return self.rng.choice(INITIAL_STATUSES)

    def estimate_delivery(self, now: datetime) -> str:
        days = self.rng.randint(1, 5)
        return short_day(now + timedelta(days=days))

    def generate_timeline(self, status: ShipmentStatus, now: datetime) -> List[TimelineEvent]:
        count = timeline_length(status)
        timeline: List[TimelineEvent] = []
        for i in range(count):
            label, icon = EVENT_STAGES[i]
            # Earlier stages sit further in the past
            when = now - timedelta(hours=(count - i) * HOURS_BETWEEN_EVENTS)
            timeline.append(
                TimelineEvent(
                    status=label,
                    location=self.rng.choice(LOCATIONS),
                    date=short_datetime(when),
                    icon=icon,
                )
            )
        return timeline
