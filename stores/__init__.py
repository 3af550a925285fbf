from .base import RecordStore
from .shipments import ShipmentStore
from .contacts import ContactStore

__all__ = [
    "RecordStore",
    "ShipmentStore",
    "ContactStore",
]
