"""Application layer: commands, parser, ports, and DTOs. Depends only on domain."""

from feebook.application.commands import (
    AddCommand,
    Command,
    DeleteCommand,
    FindCommand,
    ListCommand,
    MarkPaidCommand,
    NameContainsKeywords,
    UnmarkPaidCommand,
)
from feebook.application.dto import CommandResult, Index
from feebook.application.errors import CommandError, ContactNotFoundError, ParseError
from feebook.application.logic import Logic
from feebook.application.parser import parse_command
from feebook.application.ports import PREDICATE_SHOW_ALL_CONTACTS, Model

__all__ = [
    "AddCommand",
    "Command",
    "CommandError",
    "CommandResult",
    "ContactNotFoundError",
    "DeleteCommand",
    "FindCommand",
    "Index",
    "ListCommand",
    "Logic",
    "MarkPaidCommand",
    "Model",
    "NameContainsKeywords",
    "PREDICATE_SHOW_ALL_CONTACTS",
    "ParseError",
    "UnmarkPaidCommand",
    "parse_command",
]
