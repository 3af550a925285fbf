from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from controllers.errors import TrackerError, ValidationError
from models.contact_record import ContactRecord
from ports.platform import ConfirmPort, DialerPort, NotifierPort, ScreenPort
from services.date_format import iso_timestamp
from services.phone_utils import digits_only, format_phone, is_dialable
from services.rendering import ContactListView, build_contact_list
from services.reporting import format_contact_list
from stores.contacts import ContactStore
from utils.action_logger import log_action


logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


def _local_now() -> datetime:
    return datetime.now().astimezone()


def filter_contacts(records: List[ContactRecord], term: Optional[str], category: Optional[str]) -> List[ContactRecord]:
    """Case-insensitive name/phone substring match, intersected with an exact category."""
    needle = (term or "").strip().lower()
    wanted = (category or "").strip()
    out: List[ContactRecord] = []
    for r in records:
        if needle and needle not in r.name.lower() and needle not in r.phone.lower():
            continue
        if wanted and wanted != ALL_CATEGORIES and r.category != wanted:
            continue
        out.append(r)
    return out


class ContactController:
    """Turns phone-directory actions into store mutations and full re-renders."""

    def __init__(
        self,
        store: ContactStore,
        *,
        confirm: ConfirmPort,
        dialer: DialerPort,
        notifier: NotifierPort,
        screen: Optional[ScreenPort] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.store = store
        self.confirm = confirm
        self.dialer = dialer
        self.notifier = notifier
        self.screen = screen
        self.clock = clock or _local_now
        # Current search box / category select; view-only
        self.filter_term = ""
        self.filter_category = ALL_CATEGORIES

    def _is_filtered(self) -> bool:
        return bool(self.filter_term.strip()) or self.filter_category not in ("", ALL_CATEGORIES)

    def render(self) -> ContactListView:
        records = list(self.store.all())
        visible = filter_contacts(records, self.filter_term, self.filter_category)
        view = build_contact_list(records, visible, filtered=self._is_filtered())
        if self.screen is not None:
            self.screen.show(format_contact_list(view))
        return view

    def submit_contact(self, name: str, phone: str, category: str = "other", notes: str = "") -> ContactRecord:
        clean_name = (name or "").strip()
        if not clean_name:
            raise ValidationError("Please enter a name")
        if not is_dialable(phone):
            raise ValidationError("Please enter a valid phone number (at least 10 digits)")

        now = self.clock()
        record = ContactRecord(
            id=self.store.next_id(now),
            name=clean_name,
            phone=format_phone(phone),
            category=(category or "").strip().lower() or "other",
            notes=(notes or "").strip(),
            added_date=iso_timestamp(now),
            last_contacted=None,
            call_count=0,
        )
        self.store.add(record)
        logger.info("Contact added", extra={"store": self.store.storage_key, "action": "submit", "record_id": record.id})
        log_action(store="contacts", action="submit", record_id=record.id, extras={"category": record.category})
        self.render()
        return record

    def handle_submit(
        self, name: str, phone: str, category: str = "other", notes: str = ""
    ) -> Optional[ContactRecord]:
        """Form-submit handler: errors become an error toast instead of propagating."""
        try:
            record = self.submit_contact(name, phone, category, notes)
        except TrackerError as e:
            log_action(store="contacts", action="submit", status="rejected", error=str(e))
            self.notifier.notify(str(e), "error")
            return None
        self.notifier.notify("Contact added successfully!", "success")
        return record

    def search(self, term: str = "", category: str = ALL_CATEGORIES) -> List[ContactRecord]:
        self.filter_term = term or ""
        self.filter_category = category or ALL_CATEGORIES
        results = filter_contacts(list(self.store.all()), self.filter_term, self.filter_category)
        self.render()
        return results

    def call(self, record_id: str) -> Optional[ContactRecord]:
        if self.store.find(record_id) is None:
            return None
        moment = iso_timestamp(self.clock())

        def _mark_called(r: ContactRecord) -> ContactRecord:
            return r.model_copy(update={"last_contacted": moment, "call_count": r.call_count + 1})

        updated = self.store.update(record_id, _mark_called)
        if updated is None:
            return None
        log_action(store="contacts", action="call", record_id=record_id, extras={"call_count": updated.call_count})
        self.render()
        self.dialer.dial(digits_only(updated.phone))
        return updated

    def delete(self, record_id: str) -> bool:
        if self.store.find(record_id) is None:
            return False
        if not self.confirm.confirm("Are you sure you want to delete this contact?"):
            return False
        removed = self.store.remove(record_id)
        self.render()
        if removed:
            log_action(store="contacts", action="delete", record_id=record_id)
            self.notifier.notify("Contact deleted", "success")
        return removed
