"""Result types for parsing, executing and dispatching commands."""

from dataclasses import dataclass, field
from enum import Enum


class Signal(Enum):
    """Tells the interactive loop whether to read another command."""

    CONTINUE = "continue"
    STOP = "stop"


# --- parse rejections ---


@dataclass(frozen=True)
class ParseError:
    """Arguments have the wrong count or content."""

    message: str


@dataclass(frozen=True)
class NotFound:
    """The command refers to a contact that is not in the book."""

    name: str

    @property
    def message(self) -> str:
        return f"Contact '{self.name}' not found"


# --- execution ---


@dataclass(frozen=True)
class Executed:
    """Lines to show the user and whether the session goes on."""

    lines: tuple[str, ...] = ()
    signal: Signal = Signal.CONTINUE
    persisted: bool = False


# --- dispatch results (one per input line) ---


@dataclass(frozen=True)
class Ignored:
    """Blank input line."""

    lines: tuple[str, ...] = field(default=(), init=False)


@dataclass(frozen=True)
class Unsupported:
    """No handler is registered under this name."""

    name: str

    @property
    def lines(self) -> tuple[str, ...]:
        return (f"Command '{self.name}' not supported, try help",)


@dataclass(frozen=True)
class Rejected:
    """Handler refused the arguments; nothing was confirmed or changed."""

    reason: ParseError | NotFound

    @property
    def lines(self) -> tuple[str, ...]:
        return (self.reason.message,)


@dataclass(frozen=True)
class Cancelled:
    """User did not answer "y" to the confirmation prompt."""

    lines: tuple[str, ...] = field(default=("cancelled",), init=False)


@dataclass(frozen=True)
class Failed:
    """Unexpected error while parsing, executing or persisting."""

    message: str

    @property
    def lines(self) -> tuple[str, ...]:
        return (f"Command execution failed, error: {self.message}",)


DispatchResult = Ignored | Unsupported | Rejected | Cancelled | Executed | Failed
