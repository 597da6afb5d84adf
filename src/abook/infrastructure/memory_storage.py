"""In-memory implementation of BookStorage (no disk)."""


class InMemoryStorage:
    """Keeps the last written document. Counts writes so callers can tell whether anything was persisted."""

    def __init__(self, data: bytes | None = None) -> None:
        self.data = data
        self.writes = 0

    def read(self) -> bytes | None:
        return self.data

    def write(self, data: bytes) -> None:
        self.data = data
        self.writes += 1
