"""BookStorage backed by a single JSON file."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """Reads and overwrites one file. A missing file means an empty book."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self) -> bytes | None:
        if not self.path.exists():
            logger.info("No book at %s, starting empty", self.path)
            return None
        return self.path.read_bytes()

    def write(self, data: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(data)
