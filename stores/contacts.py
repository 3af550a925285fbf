from __future__ import annotations

from models.contact_record import ContactRecord
from ports.storage import LocalStoragePort
from stores.base import RecordStore


DEFAULT_CONTACTS_KEY = "phoneDirectoryContacts"


class ContactStore(RecordStore[ContactRecord]):
    def __init__(self, storage: LocalStoragePort, storage_key: str = DEFAULT_CONTACTS_KEY):
        super().__init__(storage, storage_key, ContactRecord)
