"""Dispatcher: one input line -> parse -> confirm -> execute -> persist."""

import logging
from collections.abc import Callable
from dataclasses import replace

from abook.application.commands import CommandContext
from abook.application.contact_store import ContactStore
from abook.application.dto import (
    Cancelled,
    DispatchResult,
    Failed,
    Ignored,
    NotFound,
    ParseError,
    Rejected,
    Unsupported,
)
from abook.application.ports import BookStorage
from abook.application.registry import CommandRegistry, default_registry
from abook.application.tokenizer import tokenize

logger = logging.getLogger(__name__)

CONFIRM_SUFFIX = "[y/n]"


def split_command(line: str) -> tuple[str, str]:
    """Return (name, remainder). Name runs up to the first whitespace."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


class Dispatcher:
    """
    Runs one command per input line against a ContactStore.

    confirm_fn(prompt) shows the prompt and returns the user's raw answer.
    Only an answer of exactly "y" lets a confirmed command run.
    Modifier commands write the whole store to storage after they execute.
    """

    def __init__(
        self,
        store: ContactStore,
        storage: BookStorage,
        confirm_fn: Callable[[str], str],
        registry: CommandRegistry | None = None,
        check_phone: Callable[[str], bool] | None = None,
    ) -> None:
        self.store = store
        self.storage = storage
        self.registry = registry or default_registry()
        self.confirm_fn = confirm_fn
        self._ctx = CommandContext(
            store=store, registry=self.registry, check_phone=check_phone
        )

    def dispatch(self, line: str) -> DispatchResult:
        name, remainder = split_command(line)
        if not name:
            return Ignored()

        handler = self.registry.get(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            return Unsupported(name=name)

        try:
            parsed = handler.parse(tokenize(remainder), self._ctx)
            if isinstance(parsed, (ParseError, NotFound)):
                logger.debug("Command %r rejected: %s", name, parsed.message)
                return Rejected(reason=parsed)

            prompt = parsed.confirmation(self._ctx)
            if prompt is not None:
                answer = self.confirm_fn(prompt + CONFIRM_SUFFIX)
                if (answer or "").strip() != "y":
                    logger.debug("Command %r cancelled by user", name)
                    return Cancelled()

            result = parsed.execute(self._ctx)
            if handler.modifier:
                self.persist()
                result = replace(result, persisted=True)
            return result
        except Exception as e:
            logger.warning("Command %r failed: %s", name, e)
            return Failed(message=str(e))

    def persist(self) -> None:
        """Write the whole store to storage."""
        self.storage.write(self.store.save_to())
        logger.info("Persisted %d contacts", len(self.store))
