from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Callable, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ports.storage import LocalStoragePort


logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class RecordStore(Generic[R]):
    """Ordered, newest-first record collection mirrored to local storage.

    Every mutation rewrites the whole collection as a JSON array under
    ``storage_key``. Records must carry a string ``id`` attribute.
    """

    def __init__(self, storage: LocalStoragePort, storage_key: str, model: Type[R]):
        self.storage = storage
        self.storage_key = storage_key
        self.model = model
        self._records: List[R] = []

    def load(self) -> Tuple[R, ...]:
        """Read the persisted collection; missing or unreadable data yields an empty one."""
        self._records = self._read()
        return self.all()

    def _read(self) -> List[R]:
        raw = self.storage.get_item(self.storage_key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(
                "Persisted collection is not valid JSON; starting empty",
                extra={"store": self.storage_key, "action": "load", "status": "corrupt", "error": str(e)},
            )
            return []
        if not isinstance(data, list):
            logger.warning(
                "Persisted collection is not a JSON array; starting empty",
                extra={"store": self.storage_key, "action": "load", "status": "corrupt"},
            )
            return []
        try:
            return [self.model.model_validate(item) for item in data]
        except PydanticValidationError as e:
            logger.warning(
                "Persisted collection failed validation; starting empty",
                extra={"store": self.storage_key, "action": "load", "status": "corrupt", "error": str(e)},
            )
            return []

    def save(self) -> None:
        payload = [r.model_dump(mode="json", by_alias=True) for r in self._records]
        self.storage.set_item(self.storage_key, json.dumps(payload, ensure_ascii=False))

    def all(self) -> Tuple[R, ...]:
        return tuple(self._records)

    def find(self, record_id: str) -> Optional[R]:
        for r in self._records:
            if r.id == record_id:  # type: ignore[attr-defined]
                return r
        return None

    def next_id(self, moment: datetime) -> str:
        """Millisecond timestamp id, bumped forward past any id already in use."""
        candidate = int(moment.timestamp() * 1000)
        while str(candidate) in self:
            candidate += 1
        return str(candidate)

    def add(self, record: R) -> R:
        self._records.insert(0, record)
        self.save()
        logger.debug(
            "Record added",
            extra={"store": self.storage_key, "action": "add", "record_id": record.id},  # type: ignore[attr-defined]
        )
        return record

    def remove(self, record_id: str) -> bool:
        """Remove by id and persist; returns False (and writes nothing) when absent."""
        kept = [r for r in self._records if r.id != record_id]  # type: ignore[attr-defined]
        if len(kept) == len(self._records):
            return False
        self._records = kept
        self.save()
        logger.debug("Record removed", extra={"store": self.storage_key, "action": "remove", "record_id": record_id})
        return True

    def update(self, record_id: str, mutator: Callable[[R], R]) -> Optional[R]:
        """Replace the record with ``mutator(record)`` and persist; None when absent."""
        for i, r in enumerate(self._records):
            if r.id != record_id:  # type: ignore[attr-defined]
                continue
            updated = mutator(r)
            if updated.id != record_id:  # type: ignore[attr-defined]
                raise ValueError("Record id is immutable")
            self._records[i] = updated
            self.save()
            logger.debug("Record updated", extra={"store": self.storage_key, "action": "update", "record_id": record_id})
            return updated
        return None

    def replace_all(self, records: List[R]) -> None:
        """Swap the whole collection (used by import) and persist it."""
        self._records = list(records)
        self.save()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return any(r.id == record_id for r in self._records)  # type: ignore[attr-defined]
