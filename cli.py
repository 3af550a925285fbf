import argparse
import json
import os
import sys
import uuid as _uuid
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from config.settings import get_settings
from controllers.contact_controller import ContactController
from controllers.shipment_controller import ShipmentController
from db import schema
from db.connection import get_connection
from db.local_storage import SqliteLocalStorage
from services.platform import BrowserDialer, ConsoleConfirm, ConsoleNotifier, ConsoleScreen
from sources.registry import get_source
from stores.base import RecordStore
from stores.contacts import ContactStore
from stores.shipments import ShipmentStore
from utils.logging_setup import init_logging
import sources  # noqa: F401 ensure registration


def _open_storage(args) -> SqliteLocalStorage:
    # One connection per command; main() closes it
    conn = getattr(args, "conn", None)
    if conn is None:
        conn = get_connection(args.db)
        schema.bootstrap(conn)
        args.conn = conn
    return SqliteLocalStorage(conn)


def _confirm(args) -> ConsoleConfirm:
    settings = get_settings()
    return ConsoleConfirm(auto_yes=bool(getattr(args, "yes", False)) or settings.auto_confirm)


def _shipment_store(args) -> ShipmentStore:
    store = ShipmentStore(_open_storage(args), get_settings().shipments_storage_key)
    store.load()
    return store


def _contact_store(args) -> ContactStore:
    store = ContactStore(_open_storage(args), get_settings().contacts_storage_key)
    store.load()
    return store


def _shipment_controller(args) -> ShipmentController:
    settings = get_settings()
    source = get_source(settings.tracking_source, seed=settings.tracking_seed)
    return ShipmentController(
        _shipment_store(args),
        source,
        confirm=_confirm(args),
        notifier=ConsoleNotifier(),
        screen=ConsoleScreen(),
    )


def _contact_controller(args) -> ContactController:
    return ContactController(
        _contact_store(args),
        confirm=_confirm(args),
        dialer=BrowserDialer(),
        notifier=ConsoleNotifier(),
        screen=ConsoleScreen(),
    )


def cmd_bootstrap(args):
    _open_storage(args)
    print("Storage ready")


def cmd_shipment_add(args):
    ctl = _shipment_controller(args)
    if ctl.handle_submit(args.tracking_number, args.carrier) is None:
        sys.exit(1)


def cmd_shipment_list(args):
    ctl = _shipment_controller(args)
    ctl.expanded.update(args.expand or [])
    ctl.render()


def cmd_shipment_delete(args):
    ctl = _shipment_controller(args)
    ctl.click(args.id, "delete")


def cmd_contact_add(args):
    ctl = _contact_controller(args)
    if ctl.handle_submit(args.name, args.phone, args.category, args.notes) is None:
        sys.exit(1)


def cmd_contact_list(args):
    _contact_controller(args).render()


def cmd_contact_search(args):
    _contact_controller(args).search(args.term, args.category)


def cmd_contact_call(args):
    _contact_controller(args).call(args.id)


def cmd_contact_delete(args):
    _contact_controller(args).delete(args.id)


def _store_for_kind(args) -> RecordStore:
    if args.kind == "shipments":
        return _shipment_store(args)
    return _contact_store(args)


def cmd_export(args):
    store = _store_for_kind(args)
    payload = [r.model_dump(mode="json", by_alias=True) for r in store.all()]
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        print(f"Exported {len(payload)} {args.kind} to {args.output}")
    else:
        print(text)


def cmd_import(args):
    store = _store_for_kind(args)
    try:
        data = json.loads(Path(args.input).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"Could not read {args.input}: {e}")
        sys.exit(1)
    if not isinstance(data, list):
        print("Import file must contain a JSON array")
        sys.exit(1)
    try:
        records = [store.model.model_validate(item) for item in data]
    except PydanticValidationError as e:
        print(f"Invalid {args.kind} record: {e}")
        sys.exit(1)
    ids = [r.id for r in records]
    if len(set(ids)) != len(ids):
        print("Import file contains duplicate ids")
        sys.exit(1)
    if args.kind == "shipments":
        numbers = [r.tracking_number for r in records]
        if len(set(numbers)) != len(numbers):
            print("Import file contains duplicate tracking numbers")
            sys.exit(1)
    store.replace_all(records)
    print(f"Imported {len(records)} {args.kind}")


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex
    parser = argparse.ArgumentParser(description="Package tracker and phone directory")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite storage file (default from settings)")
    parser.add_argument("--yes", "-y", action="store_true", help="Answer yes to confirmation prompts")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create the local storage table")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_sa = sub.add_parser("shipment-add", help="Start tracking a package")
    p_sa.add_argument("--tracking-number", "-n", required=True, help="Carrier tracking number")
    p_sa.add_argument("--carrier", "-c", required=True, help="Carrier name, e.g. UPS, FedEx, USPS, DHL")
    p_sa.set_defaults(func=cmd_shipment_add)

    p_sl = sub.add_parser("shipment-list", help="Show tracked packages")
    p_sl.add_argument("--expand", "-e", action="append", help="Shipment id whose history to show (repeatable)")
    p_sl.set_defaults(func=cmd_shipment_list)

    p_sd = sub.add_parser("shipment-delete", help="Stop tracking a package")
    p_sd.add_argument("id", help="Shipment id")
    p_sd.set_defaults(func=cmd_shipment_delete)

    p_ca = sub.add_parser("contact-add", help="Add a contact")
    p_ca.add_argument("--name", required=True)
    p_ca.add_argument("--phone", required=True, help="At least 10 digits; US numbers are formatted")
    p_ca.add_argument("--category", default="other", help=f"One of: {', '.join(settings.contact_categories)}")
    p_ca.add_argument("--notes", default="")
    p_ca.set_defaults(func=cmd_contact_add)

    p_cl = sub.add_parser("contact-list", help="Show all contacts")
    p_cl.set_defaults(func=cmd_contact_list)

    p_cs = sub.add_parser("contact-search", help="Filter contacts by name/phone and category")
    p_cs.add_argument("--term", "-t", default="", help="Case-insensitive name or phone fragment")
    p_cs.add_argument("--category", default="all", help="Exact category or 'all' (default)")
    p_cs.set_defaults(func=cmd_contact_search)

    p_cc = sub.add_parser("contact-call", help="Call a contact and record the call")
    p_cc.add_argument("id", help="Contact id")
    p_cc.set_defaults(func=cmd_contact_call)

    p_cd = sub.add_parser("contact-delete", help="Delete a contact")
    p_cd.add_argument("id", help="Contact id")
    p_cd.set_defaults(func=cmd_contact_delete)

    p_ex = sub.add_parser("export", help="Dump a collection as JSON")
    p_ex.add_argument("kind", choices=["shipments", "contacts"])
    p_ex.add_argument("--output", "-o", help="Write to file instead of stdout")
    p_ex.set_defaults(func=cmd_export)

    p_im = sub.add_parser("import", help="Replace a collection from a JSON array file")
    p_im.add_argument("kind", choices=["shipments", "contacts"])
    p_im.add_argument("--input", "-i", required=True, help="Path to JSON file")
    p_im.set_defaults(func=cmd_import)

    args = parser.parse_args()
    try:
        args.func(args)
    finally:
        conn = getattr(args, "conn", None)
        if conn is not None:
            conn.close()


if __name__ == "__main__":
    main()
