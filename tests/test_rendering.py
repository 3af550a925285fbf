from __future__ import annotations

from models.contact_record import ContactRecord
from models.shipment_record import ShipmentRecord, TimelineEvent
from services.rendering import build_contact_list, build_shipment_list
from services.reporting import format_contact_list, format_shipment_list


def _shipment(rid: str, status: str) -> ShipmentRecord:
    return ShipmentRecord(
        id=rid,
        tracking_number=f"TN{rid}",
        carrier="UPS",
        status=status,
        added_date="2024-03-14T15:09:26.000Z",
        estimated_delivery="Fri, Mar 15",
        timeline=[
            TimelineEvent(status="Order Placed", location="Memphis, TN", date="Mar 13, 3:09 PM", icon="📝"),
            TimelineEvent(status="Package Picked Up", location="Dallas, TX", date="Mar 14, 3:09 AM", icon="📦"),
        ],
    )


def test_empty_shipment_list():
    view = build_shipment_list([])
    assert view.count == 0 and view.is_empty and view.cards == ()
    assert "No shipments tracked yet" in format_shipment_list(view)


def test_shipment_cards_follow_store_order_and_status_config():
    view = build_shipment_list([_shipment("2", "delivered"), _shipment("1", "in-transit")], expanded_ids={"1"})
    assert view.count == 2 and not view.is_empty
    delivered, transit = view.cards
    assert (delivered.status_label, delivered.status_icon, delivered.delivery_text) == ("Delivered", "✅", "Delivered")
    assert (transit.status_label, transit.delivery_text) == ("In Transit", "Est. Fri, Mar 15")
    assert transit.expanded and not delivered.expanded
    assert [e.status for e in transit.timeline] == ["Order Placed", "Package Picked Up"]


def test_exception_status_has_its_own_badge():
    card = build_shipment_list([_shipment("1", "exception")]).cards[0]
    assert (card.status_class, card.status_label) == ("exception", "Exception")


def test_unknown_status_falls_back_to_pending_badge():
    card = build_shipment_list([_shipment("1", "returned")]).cards[0]
    pending = build_shipment_list([_shipment("2", "pending")]).cards[0]
    assert (card.status_class, card.status_label, card.status_icon) == (
        pending.status_class,
        pending.status_label,
        pending.status_icon,
    )
    assert card.delivery_text == "Est. Fri, Mar 15"


def test_collapsed_card_hides_history():
    text = format_shipment_list(build_shipment_list([_shipment("1", "pending")]))
    assert "TN1" in text and "Est. Fri, Mar 15" in text
    assert "Tracking History" not in text
    expanded = format_shipment_list(build_shipment_list([_shipment("1", "pending")], ["1"]))
    assert "Memphis, TN" in expanded


def _contact(rid: str, name: str, **kw) -> ContactRecord:
    return ContactRecord(id=rid, name=name, phone="(555) 123-4567", added_date="2024-03-14T15:09:26.000Z", **kw)


def test_contact_cards():
    records = [
        _contact("2", "John Smith", category="work", call_count=1, last_contacted="2024-03-14T15:09:26.000Z"),
        _contact("1", "Jane Doe", notes="neighbour"),
    ]
    view = build_contact_list(records)
    assert view.count == view.shown == 2
    john, jane = view.cards
    assert john.category_label == "Work"
    assert john.call_count_text == "Called 1 time"
    assert john.last_contacted_text.startswith("Last contacted ")
    assert jane.last_contacted_text == "Never contacted"
    assert jane.call_count_text == "No calls yet"
    assert "Notes: neighbour" in format_contact_list(view)


def test_contact_empty_states():
    assert build_contact_list([]).empty_message.startswith("No contacts yet")
    filtered = build_contact_list([_contact("1", "Jane")], visible=[], filtered=True)
    assert filtered.count == 1 and filtered.shown == 0 and filtered.is_empty
    assert filtered.empty_message == "No contacts match your search."
    assert "showing 0" in format_contact_list(filtered)
