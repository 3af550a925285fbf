from __future__ import annotations

from typing import Optional

from models.shipment_record import ShipmentRecord
from ports.storage import LocalStoragePort
from stores.base import RecordStore


DEFAULT_SHIPMENTS_KEY = "packageTrackerShipments"


class ShipmentStore(RecordStore[ShipmentRecord]):
    def __init__(self, storage: LocalStoragePort, storage_key: str = DEFAULT_SHIPMENTS_KEY):
        super().__init__(storage, storage_key, ShipmentRecord)

    def find_by_tracking_number(self, tracking_number: str) -> Optional[ShipmentRecord]:
        for r in self.all():
            if r.tracking_number == tracking_number:
                return r
        return None
