"""Pure derivation of display models from record lists.

Nothing here touches the screen; ``services.reporting`` turns these models
into text.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Tuple

from models.contact_record import ContactRecord
from models.shipment_record import ShipmentRecord
from services.date_format import display_timestamp


STATUS_CONFIG: Dict[str, Dict[str, str]] = {
    "pending": {"label": "Pending", "icon": "⏳", "css": "pending"},
    "in-transit": {"label": "In Transit", "icon": "🚚", "css": "in-transit"},
    "delivered": {"label": "Delivered", "icon": "✅", "css": "delivered"},
    "exception": {"label": "Exception", "icon": "⚠️", "css": "exception"},
}

CATEGORY_ICONS: Dict[str, str] = {
    "family": "👪",
    "friends": "🧑‍🤝‍🧑",
    "work": "💼",
    "business": "🏢",
    "emergency": "🚨",
    "other": "📇",
}


@dataclass(frozen=True)
class TimelineEntryView:
    icon: str
    status: str
    location: str
    date: str


@dataclass(frozen=True)
class ShipmentCardView:
    record_id: str
    tracking_number: str
    carrier: str
    status_class: str
    status_label: str
    status_icon: str
    delivery_text: str
    expanded: bool
    timeline: Tuple[TimelineEntryView, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ShipmentListView:
    count: int
    is_empty: bool
    cards: Tuple[ShipmentCardView, ...]


@dataclass(frozen=True)
class ContactCardView:
    record_id: str
    name: str
    phone: str
    category: str
    category_label: str
    category_icon: str
    notes: str
    last_contacted_text: str
    call_count_text: str


@dataclass(frozen=True)
class ContactListView:
    count: int
    shown: int
    is_empty: bool
    empty_message: str
    cards: Tuple[ContactCardView, ...]


def build_shipment_card(record: ShipmentRecord, expanded: bool = False) -> ShipmentCardView:
    config = STATUS_CONFIG.get(record.status, STATUS_CONFIG["pending"])
    if record.status == "delivered":
        delivery_text = "Delivered"
    else:
        delivery_text = f"Est. {record.estimated_delivery}"
    return ShipmentCardView(
        record_id=record.id,
        tracking_number=record.tracking_number,
        carrier=record.carrier,
        status_class=config["css"],
        status_label=config["label"],
        status_icon=config["icon"],
        delivery_text=delivery_text,
        expanded=expanded,
        timeline=tuple(
            TimelineEntryView(icon=e.icon, status=e.status, location=e.location, date=e.date)
            for e in record.timeline
        ),
    )


def build_shipment_list(
    records: Sequence[ShipmentRecord], expanded_ids: Optional[Iterable[str]] = None
) -> ShipmentListView:
    expanded = set(expanded_ids or ())
    cards = tuple(build_shipment_card(r, r.id in expanded) for r in records)
    return ShipmentListView(count=len(records), is_empty=not cards, cards=cards)


def _plural_calls(count: int) -> str:
    if count == 0:
        return "No calls yet"
    return f"Called {count} time" + ("" if count == 1 else "s")


def build_contact_card(record: ContactRecord) -> ContactCardView:
    category = (record.category or "other").lower()
    last = display_timestamp(record.last_contacted)
    return ContactCardView(
        record_id=record.id,
        name=record.name,
        phone=record.phone,
        category=category,
        category_label=category.capitalize(),
        category_icon=CATEGORY_ICONS.get(category, CATEGORY_ICONS["other"]),
        notes=record.notes or "",
        last_contacted_text=f"Last contacted {last}" if last else "Never contacted",
        call_count_text=_plural_calls(record.call_count),
    )


def build_contact_list(
    records: Sequence[ContactRecord],
    visible: Optional[Sequence[ContactRecord]] = None,
    filtered: bool = False,
) -> ContactListView:
    """Cards for ``visible`` (defaults to all records); the badge always counts every record."""
    shown = list(records if visible is None else visible)
    cards = tuple(build_contact_card(r) for r in shown)
    if not records:
        empty_message = "No contacts yet. Add your first contact above."
    elif filtered and not cards:
        empty_message = "No contacts match your search."
    else:
        empty_message = ""
    return ContactListView(
        count=len(records),
        shown=len(cards),
        is_empty=not cards,
        empty_message=empty_message,
        cards=cards,
    )
