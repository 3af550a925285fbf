from __future__ import annotations

from typing import Dict, List, Tuple

from models.shipment_record import ShipmentStatus


# Canonical pipeline a parcel moves through, oldest stage first: (label, icon)
EVENT_STAGES: List[Tuple[str, str]] = [
    ("Order Placed", "📝"),
    ("Package Picked Up", "📦"),
    ("In Transit", "🚚"),
    ("Out for Delivery", "🚛"),
    ("Delivered", "✅"),
]

LOCATIONS: List[str] = [
    "Memphis, TN",
    "Louisville, KY",
    "Chicago, IL",
    "Los Angeles, CA",
    "New York, NY",
    "Dallas, TX",
    "Atlanta, GA",
    "Seattle, WA",
]

# Statuses a freshly added shipment may start in
INITIAL_STATUSES: List[ShipmentStatus] = ["pending", "in-transit", "delivered"]

TIMELINE_LENGTHS: Dict[str, int] = {
    "pending": 2,
    "in-transit": 3,
    "delivered": 5,
}

HOURS_BETWEEN_EVENTS = 12


def timeline_length(status: str) -> int:
    """Number of stages reached for a status; unknown statuses get the pending length."""
    return TIMELINE_LENGTHS.get(status, TIMELINE_LENGTHS["pending"])
