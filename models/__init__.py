from .shipment_record import ShipmentRecord, ShipmentStatus, TimelineEvent
from .contact_record import ContactRecord

__all__ = [
    "ShipmentRecord",
    "ShipmentStatus",
    "TimelineEvent",
    "ContactRecord",
]
