from __future__ import annotations

from typing import List

from services.rendering import ContactCardView, ContactListView, ShipmentCardView, ShipmentListView


RULE = "=" * 60
THIN_RULE = "-" * 60


def format_shipment_card(card: ShipmentCardView) -> str:
    lines: List[str] = [
        f"{card.tracking_number}  [{card.carrier}]  id={card.record_id}",
        f"  {card.status_icon} {card.status_label}  |  {card.delivery_text}",
    ]
    if card.expanded:
        lines.append("  Tracking History")
        for entry in card.timeline:
            lines.append(f"    {entry.icon} {entry.status} - {entry.location} ({entry.date})")
    return "\n".join(lines)


def format_shipment_list(view: ShipmentListView) -> str:
    """Text block for the shipments page: header, count badge, cards or empty state."""
    out: List[str] = [RULE, f"PACKAGE TRACKER ({view.count})", RULE]
    if view.is_empty:
        out.append("No shipments tracked yet. Add a tracking number to get started.")
    else:
        for i, card in enumerate(view.cards):
            if i:
                out.append(THIN_RULE)
            out.append(format_shipment_card(card))
    out.append(RULE)
    return "\n".join(out)


def format_contact_card(card: ContactCardView) -> str:
    lines: List[str] = [
        f"{card.category_icon} {card.name}  {card.phone}  id={card.record_id}",
        f"  {card.category_label}  |  {card.last_contacted_text}  |  {card.call_count_text}",
    ]
    if card.notes:
        lines.append(f"  Notes: {card.notes}")
    return "\n".join(lines)


def format_contact_list(view: ContactListView) -> str:
    header = f"PHONE DIRECTORY ({view.count})"
    if view.shown != view.count:
        header += f" - showing {view.shown}"
    out: List[str] = [RULE, header, RULE]
    if view.is_empty:
        out.append(view.empty_message)
    else:
        for i, card in enumerate(view.cards):
            if i:
                out.append(THIN_RULE)
            out.append(format_contact_card(card))
    out.append(RULE)
    return "\n".join(out)
