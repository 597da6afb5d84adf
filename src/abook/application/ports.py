"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol


class BookStorage(Protocol):
    """Holds the serialized address book between sessions."""

    def read(self) -> bytes | None:
        """Return the stored document, or None if nothing was stored yet."""
        ...

    def write(self, data: bytes) -> None:
        """Replace the stored document with data."""
        ...
