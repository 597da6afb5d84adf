"""Name -> handler mapping, built once per session."""

from collections.abc import Iterable
from types import MappingProxyType

from abook.application.commands import (
    AddCommand,
    CommandHandler,
    DeleteCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
    SearchCommand,
    SelfTestCommand,
)


class CommandRegistry:
    """Read-only set of handlers, keyed by exact (case-sensitive) command name."""

    def __init__(self, handlers: Iterable[CommandHandler]) -> None:
        by_name: dict[str, CommandHandler] = {}
        for handler in handlers:
            if handler.name in by_name:
                raise ValueError(f"Command '{handler.name}' already registered")
            by_name[handler.name] = handler
        self._by_name = MappingProxyType(dict(sorted(by_name.items())))

    def get(self, name: str) -> CommandHandler | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return list(self._by_name)

    def handlers(self) -> list[CommandHandler]:
        """Handlers sorted by command name."""
        return list(self._by_name.values())

    def help_lines(self) -> list[str]:
        return [h.help for h in self._by_name.values()]


def default_registry() -> CommandRegistry:
    return CommandRegistry(
        [
            SelfTestCommand(),
            SearchCommand(),
            HelpCommand(),
            ExitCommand(),
            AddCommand(),
            DeleteCommand(),
            ListCommand(),
        ]
    )
