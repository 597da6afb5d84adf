"""Command handlers and the invocations they parse.

A handler is stateless and lives for the whole session. Each call to
parse() returns a fresh invocation carrying that call's arguments, or a
ParseError / NotFound explaining why the input was refused. The dispatcher
asks the invocation for a confirmation prompt, then executes it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from abook.application.contact_store import ContactStore
from abook.application.dto import Executed, NotFound, ParseError, Signal
from abook.domain import Contact

if TYPE_CHECKING:
    from abook.application.registry import CommandRegistry

logger = logging.getLogger(__name__)

WRONG_ARITY = "invalid number of arguments, see help for details"


@dataclass(frozen=True)
class CommandContext:
    """What a command may touch while it runs."""

    store: ContactStore
    registry: "CommandRegistry"
    check_phone: Callable[[str], bool] | None = None


class Invocation(Protocol):
    """One parsed command, valid for a single dispatch."""

    def confirmation(self, ctx: CommandContext) -> str | None:
        """Text to confirm before executing, or None to run straight away."""
        ...

    def execute(self, ctx: CommandContext) -> Executed:
        ...


class CommandHandler(Protocol):
    name: str
    help: str
    modifier: bool

    def parse(
        self, args: list[str], ctx: CommandContext
    ) -> Invocation | ParseError | NotFound:
        """Validate args. Must not change the store."""
        ...


def _contact_lines(contacts: list[Contact]) -> list[str]:
    return [str(c) for c in contacts]


# --- invocations ---


@dataclass(frozen=True)
class EchoArguments:
    args: tuple[str, ...]

    def confirmation(self, ctx: CommandContext) -> str | None:
        return "confirm testing"

    def execute(self, ctx: CommandContext) -> Executed:
        return Executed(lines=("arguments: " + "; ".join(self.args), "run done"))


@dataclass(frozen=True)
class SearchContacts:
    prefix: str

    def confirmation(self, ctx: CommandContext) -> str | None:
        return None

    def execute(self, ctx: CommandContext) -> Executed:
        found = ctx.store.search_prefix(self.prefix)
        lines = []
        if not found:
            lines.append(f"no contacts starting with '{self.prefix}'")
        lines.extend(_contact_lines(found))
        lines.append(f"total {len(found)} contacts found")
        return Executed(lines=tuple(lines))


@dataclass(frozen=True)
class AddContact:
    contact: Contact

    def confirmation(self, ctx: CommandContext) -> str | None:
        text = f"You are about to add: {self.contact}\n"
        old = ctx.store.get(self.contact.name)
        if old is not None:
            text += f"Addition will replace: {old}\n"
        return text + "confirm addition"

    def execute(self, ctx: CommandContext) -> Executed:
        if ctx.check_phone and not ctx.check_phone(self.contact.phone):
            logger.warning(
                "Phone %r for %r is not a recognised number; stored as entered",
                self.contact.phone,
                self.contact.name,
            )
        previous = ctx.store.set(self.contact)
        logger.info("%s contact %r", "Replaced" if previous else "Added", self.contact.name)
        return Executed()


@dataclass(frozen=True)
class DeleteContact:
    contact: Contact

    def confirmation(self, ctx: CommandContext) -> str | None:
        return f"You are going to delete: {self.contact}\nconfirm deletion"

    def execute(self, ctx: CommandContext) -> Executed:
        ctx.store.remove(self.contact.name)
        logger.info("Deleted contact %r", self.contact.name)
        return Executed()


@dataclass(frozen=True)
class ShowHelp:
    def confirmation(self, ctx: CommandContext) -> str | None:
        return None

    def execute(self, ctx: CommandContext) -> Executed:
        return Executed(lines=("Address book commands:", *ctx.registry.help_lines()))


@dataclass(frozen=True)
class ListContacts:
    def confirmation(self, ctx: CommandContext) -> str | None:
        return None

    def execute(self, ctx: CommandContext) -> Executed:
        contacts = ctx.store.all()
        return Executed(
            lines=(*_contact_lines(contacts), f"total {len(contacts)} contacts")
        )


@dataclass(frozen=True)
class ExitSession:
    def confirmation(self, ctx: CommandContext) -> str | None:
        return None

    def execute(self, ctx: CommandContext) -> Executed:
        return Executed(lines=("exiting...",), signal=Signal.STOP)


# --- handlers ---


class SelfTestCommand:
    name = "test"
    help = "test: command for testing"
    modifier = False

    def parse(
        self, args: list[str], ctx: CommandContext
    ) -> Invocation | ParseError | NotFound:
        if not args:
            return ParseError("no arguments")
        return EchoArguments(args=tuple(args))


class SearchCommand:
    name = "search"
    help = "search <starting part of the name>: searches for user"
    modifier = False

    def parse(
        self, args: list[str], ctx: CommandContext
    ) -> Invocation | ParseError | NotFound:
        if len(args) != 1:
            return ParseError(
                "invalid number of arguments, search string should be single argument"
            )
        prefix = args[0].strip()
        if not prefix:
            return ParseError("argument, search string is empty")
        return SearchContacts(prefix=prefix)


class AddCommand:
    name = "add"
    help = "add <name> <phone> <mail>: add contact to book"
    modifier = True

    def parse(
        self, args: list[str], ctx: CommandContext
    ) -> Invocation | ParseError | NotFound:
        if len(args) != 3:
            return ParseError(WRONG_ARITY)
        name, phone, email = args
        return AddContact(contact=Contact(name=name, phone=phone, email=email))


class DeleteCommand:
    name = "delete"
    help = "delete <contact name>: delete contact from book"
    modifier = True

    def parse(
        self, args: list[str], ctx: CommandContext
    ) -> Invocation | ParseError | NotFound:
        if len(args) != 1:
            return ParseError(WRONG_ARITY)
        contact = ctx.store.get(args[0])
        if contact is None:
            return NotFound(name=args[0])
        return DeleteContact(contact=contact)


class HelpCommand:
    name = "help"
    help = "help: prints this message"
    modifier = False

    def parse(
        self, args: list[str], ctx: CommandContext
    ) -> Invocation | ParseError | NotFound:
        return ShowHelp()


class ListCommand:
    name = "list"
    help = "list: lists all contacts in address book"
    modifier = False

    def parse(
        self, args: list[str], ctx: CommandContext
    ) -> Invocation | ParseError | NotFound:
        return ListContacts()


class ExitCommand:
    name = "exit"
    help = "exit: ends address book session"
    modifier = True

    def parse(
        self, args: list[str], ctx: CommandContext
    ) -> Invocation | ParseError | NotFound:
        return ExitSession()
