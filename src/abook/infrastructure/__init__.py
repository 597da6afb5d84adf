"""Infrastructure layer: concrete implementations of application ports."""

from abook.infrastructure.file_storage import JsonFileStorage
from abook.infrastructure.memory_storage import InMemoryStorage
from abook.infrastructure.phone import check_phone, phone_checker

__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "check_phone",
    "phone_checker",
]
