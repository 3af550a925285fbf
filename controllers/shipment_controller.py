from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Literal, Optional, Set

from controllers.errors import DuplicateError, TrackerError, ValidationError
from models.shipment_record import ShipmentRecord, ShipmentStatus, TimelineEvent
from ports.platform import ConfirmPort, NotifierPort, ScreenPort
from ports.source import TrackingSourcePort
from services.date_format import iso_timestamp
from services.rendering import ShipmentListView, build_shipment_list
from services.reporting import format_shipment_list
from stores.shipments import ShipmentStore
from utils.action_logger import log_action


logger = logging.getLogger(__name__)

ClickTarget = Literal["card", "delete"]


def _local_now() -> datetime:
    return datetime.now().astimezone()


class ShipmentController:
    """Turns package-tracker actions into store mutations and full re-renders."""

    def __init__(
        self,
        store: ShipmentStore,
        source: TrackingSourcePort,
        *,
        confirm: ConfirmPort,
        notifier: NotifierPort,
        screen: Optional[ScreenPort] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.store = store
        self.source = source
        self.confirm = confirm
        self.notifier = notifier
        self.screen = screen
        self.clock = clock or _local_now
        # View-only state; never persisted
        self.expanded: Set[str] = set()

    def render(self) -> ShipmentListView:
        # Drop flags for cards that no longer exist
        self.expanded &= {r.id for r in self.store.all()}
        view = build_shipment_list(self.store.all(), self.expanded)
        if self.screen is not None:
            self.screen.show(format_shipment_list(view))
        return view

    def generate_timeline(self, status: ShipmentStatus, now: Optional[datetime] = None) -> List[TimelineEvent]:
        return self.source.generate_timeline(status, now or self.clock())

    def submit_tracking(self, tracking_number: str, carrier: str) -> ShipmentRecord:
        number = (tracking_number or "").strip()
        carrier_name = (carrier or "").strip()
        if not number or not carrier_name:
            raise ValidationError("Please fill in all fields")
        if self.store.find_by_tracking_number(number) is not None:
            raise DuplicateError("This tracking number is already being tracked")

        now = self.clock()
        status = self.source.choose_status()
        record = ShipmentRecord(
            id=self.store.next_id(now),
            tracking_number=number,
            carrier=carrier_name,
            status=status,
            added_date=iso_timestamp(now),
            estimated_delivery=self.source.estimate_delivery(now),
            timeline=self.generate_timeline(status, now),
        )
        self.store.add(record)
        logger.info(
            "Tracking added",
            extra={"store": self.store.storage_key, "action": "submit", "record_id": record.id, "status": record.status},
        )
        log_action(store="shipments", action="submit", record_id=record.id, extras={"carrier": carrier_name})
        self.render()
        return record

    def handle_submit(self, tracking_number: str, carrier: str) -> Optional[ShipmentRecord]:
        """Form-submit handler: errors become an error toast instead of propagating."""
        try:
            record = self.submit_tracking(tracking_number, carrier)
        except TrackerError as e:
            log_action(store="shipments", action="submit", status="rejected", error=str(e))
            self.notifier.notify(str(e), "error")
            return None
        self.notifier.notify("Tracking added successfully!", "success")
        return record

    def toggle_expanded(self, record_id: str) -> bool:
        if record_id in self.expanded:
            self.expanded.discard(record_id)
            expanded = False
        else:
            self.expanded.add(record_id)
            expanded = True
        self.render()
        return expanded

    def delete_tracking(self, record_id: str) -> bool:
        if not self.confirm.confirm("Are you sure you want to stop tracking this shipment?"):
            return False
        removed = self.store.remove(record_id)
        self.expanded.discard(record_id)
        self.render()
        if removed:
            log_action(store="shipments", action="delete", record_id=record_id)
            self.notifier.notify("Tracking removed", "success")
        return removed

    def click(self, record_id: str, target: ClickTarget = "card") -> None:
        """Dispatch a click inside a card. A delete click does not bubble up to the card toggle."""
        if target == "delete":
            self.delete_tracking(record_id)
            return
        self.toggle_expanded(record_id)
