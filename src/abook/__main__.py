"""
Interactive address book.
Run: python -m abook (from repo root, with .env or env vars set; see abook.config).
"""

import logging
import sys
from collections.abc import Callable

from abook.application import (
    Dispatcher,
    Executed,
    Ignored,
    MalformedStoreData,
    Signal,
    load_store,
)
from abook.config import get_settings, load_env
from abook.infrastructure import JsonFileStorage, phone_checker

logger = logging.getLogger(__name__)

PROMPT = ">"


def confirm_with(read_line: Callable[[str], str]) -> Callable[[str], str]:
    """Wrap read_line for y/n prompts. End of input or Ctrl-C counts as "no"."""

    def confirm(prompt: str) -> str:
        try:
            return read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            return ""

    return confirm


def run_session(
    dispatcher: Dispatcher,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Read and dispatch lines until exit or end of input, then persist the book."""
    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            write("")
            break
        result = dispatcher.dispatch(line)
        if isinstance(result, Ignored):
            continue
        for text in result.lines:
            write(text)
        write("")
        if isinstance(result, Executed) and result.signal is Signal.STOP:
            if not result.persisted:
                dispatcher.persist()
            return
    dispatcher.persist()


def main() -> None:
    print("Mega address book\n")
    try:
        load_env()
        settings = get_settings()
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=settings.log_level,
        )
        storage = JsonFileStorage(settings.book_path)
        store = load_store(storage)
        dispatcher = Dispatcher(
            store,
            storage,
            confirm_fn=confirm_with(input),
            check_phone=phone_checker(settings.phone_region),
        )
        run_session(dispatcher, read_line=input)
    except MalformedStoreData as e:
        print(f"something went terribly wrong: {settings.book_path}: {e}")
        print("Fix or remove the file and start again.")
        sys.exit(1)
    except Exception as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"something went terribly wrong: {e}")
        sys.exit(1)
    print("bye.")


if __name__ == "__main__":
    main()
