"""Application layer: contact store, commands, dispatch, ports and result types. Depends only on domain."""

from abook.application.commands import CommandContext, CommandHandler, Invocation
from abook.application.contact_store import ContactStore, MalformedStoreData, load_store
from abook.application.dispatcher import Dispatcher, split_command
from abook.application.dto import (
    Cancelled,
    DispatchResult,
    Executed,
    Failed,
    Ignored,
    NotFound,
    ParseError,
    Rejected,
    Signal,
    Unsupported,
)
from abook.application.ports import BookStorage
from abook.application.registry import CommandRegistry, default_registry
from abook.application.tokenizer import tokenize

__all__ = [
    "BookStorage",
    "Cancelled",
    "CommandContext",
    "CommandHandler",
    "CommandRegistry",
    "ContactStore",
    "DispatchResult",
    "Dispatcher",
    "Executed",
    "Failed",
    "Ignored",
    "Invocation",
    "MalformedStoreData",
    "NotFound",
    "ParseError",
    "Rejected",
    "Signal",
    "Unsupported",
    "default_registry",
    "load_store",
    "split_command",
    "tokenize",
]
