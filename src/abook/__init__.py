"""
abook: interactive address book.

- domain: entities (Contact). No outer dependencies.
- application: ContactStore, command handlers, CommandRegistry, Dispatcher, BookStorage port.
- infrastructure: adapters (JsonFileStorage, InMemoryStorage) and phone normalization.
"""

from abook.application import (
    BookStorage,
    CommandRegistry,
    ContactStore,
    Dispatcher,
    MalformedStoreData,
    default_registry,
    load_store,
    tokenize,
)
from abook.domain import Contact
from abook.infrastructure import InMemoryStorage, JsonFileStorage

__all__ = [
    "BookStorage",
    "CommandRegistry",
    "Contact",
    "ContactStore",
    "Dispatcher",
    "InMemoryStorage",
    "JsonFileStorage",
    "MalformedStoreData",
    "default_registry",
    "load_store",
    "tokenize",
]
