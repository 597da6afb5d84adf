"""Contacts kept in name order, with prefix search and JSON (de)serialization."""

import bisect
import json
import logging
from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from abook.application.ports import BookStorage
from abook.domain import Contact

logger = logging.getLogger(__name__)


class MalformedStoreData(ValueError):
    """Persisted data is not a JSON array of contact records."""


class ContactRecord(BaseModel):
    """One element of the persisted JSON array."""

    model_config = ConfigDict(strict=True)

    name: str
    phone: str
    email: str


_RECORDS = TypeAdapter(list[ContactRecord])


class ContactStore:
    """Maps name -> Contact. Names are kept sorted so lookups by prefix are a single seek.

    _names mirrors the keys of _by_name in lexicographic order.
    """

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self._by_name: dict[str, Contact] = {}
        self._names: list[str] = []
        for contact in contacts or []:
            self.set(contact)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def set(self, contact: Contact) -> Contact | None:
        """Insert or replace by name. Returns the contact previously stored under that name."""
        previous = self._by_name.get(contact.name)
        if previous is None:
            bisect.insort(self._names, contact.name)
        self._by_name[contact.name] = contact
        return previous

    def get(self, name: str) -> Contact | None:
        return self._by_name.get(name)

    def remove(self, name: str) -> Contact | None:
        previous = self._by_name.pop(name, None)
        if previous is not None:
            del self._names[bisect.bisect_left(self._names, name)]
        return previous

    def search_prefix(self, prefix: str) -> list[Contact]:
        """Return contacts whose name starts with prefix, in name order."""
        out = []
        i = bisect.bisect_left(self._names, prefix)
        while i < len(self._names) and self._names[i].startswith(prefix):
            out.append(self._by_name[self._names[i]])
            i += 1
        return out

    def all(self) -> list[Contact]:
        return [self._by_name[name] for name in self._names]

    def load_from(self, data: bytes | str) -> None:
        """Add every record from a JSON array. Later records win over earlier ones with the same name.

        Raises MalformedStoreData and leaves the store untouched if any record is invalid.
        """
        try:
            records = _RECORDS.validate_json(data)
        except ValidationError as e:
            raise MalformedStoreData(
                f"not a valid array of contact records ({e.error_count()} errors)"
            ) from e
        for record in records:
            self.set(Contact(name=record.name, phone=record.phone, email=record.email))
        logger.debug("Loaded %d records, %d contacts in book", len(records), len(self))

    def save_to(self) -> bytes:
        """Serialize all contacts, in name order, as a JSON array."""
        payload = [asdict(contact) for contact in self.all()]
        return json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")


def load_store(storage: BookStorage) -> ContactStore:
    """Build a store from whatever storage holds. Nothing stored yet means an empty store."""
    store = ContactStore()
    data = storage.read()
    if data is not None:
        store.load_from(data)
    logger.info("Loaded %d contacts", len(store))
    return store
