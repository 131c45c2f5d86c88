"""
feebook core: clean-architecture layout.

- domain: Contact and its value objects (MonthPaid, Tag). No outer dependencies.
- application: commands, parser, Logic, ports (Model), DTOs.
- infrastructure: adapters (ModelManager), phone normalization, settings.
"""

from feebook.application import (
    AddCommand,
    CommandError,
    CommandResult,
    Index,
    Logic,
    MarkPaidCommand,
    Model,
    ParseError,
    parse_command,
)
from feebook.domain import Contact, MonthPaid, Tag
from feebook.infrastructure import ModelManager

__all__ = [
    "AddCommand",
    "CommandError",
    "CommandResult",
    "Contact",
    "Index",
    "Logic",
    "MarkPaidCommand",
    "Model",
    "ModelManager",
    "MonthPaid",
    "ParseError",
    "Tag",
    "parse_command",
]
