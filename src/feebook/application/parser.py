"""Turns raw command text (e.g. "markpaid 1 m/2024-01 m/2024-02") into commands."""

import re

from feebook.application.commands import (
    Command,
    DeleteCommand,
    FindCommand,
    ListCommand,
    MarkPaidCommand,
    NameContainsKeywords,
    UnmarkPaidCommand,
)
from feebook.application.dto import Index
from feebook.application.errors import ParseError
from feebook.application.messages import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
)
from feebook.domain import MonthPaid

PREFIX_MONTH_PAID = "m/"

_COMMAND_FORMAT = re.compile(r"^(?P<word>\S+)(?P<arguments>.*)$", re.DOTALL)
_MONTH_PREFIX_SPLIT = re.compile(r"\s+(?=" + re.escape(PREFIX_MONTH_PAID) + r")")


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


def parse_index(raw: str, usage: str) -> Index:
    """Parse a one-based positive integer index."""
    raw = raw.strip()
    if not re.fullmatch(r"[0-9]+", raw) or int(raw) == 0:
        raise _invalid_format(usage)
    return Index.from_one_based(int(raw))


def _parse_index_and_months(arguments: str, usage: str) -> tuple[Index, set[MonthPaid]]:
    # " 1 m/2024-01 m/2024-02" -> ["1", "m/2024-01", "m/2024-02"]
    parts = _MONTH_PREFIX_SPLIT.split(" " + arguments.strip())
    preamble = parts[0]
    month_parts = [p for p in parts[1:] if p.startswith(PREFIX_MONTH_PAID)]
    if not month_parts:
        raise _invalid_format(usage)
    index = parse_index(preamble, usage)
    months = set()
    for part in month_parts:
        raw = part[len(PREFIX_MONTH_PAID):].strip()
        if not raw:
            raise _invalid_format(usage)
        # Format is checked by the command so the user sees the offending token.
        months.add(MonthPaid(raw))
    return index, months


def parse_command(text: str) -> Command:
    """Parse user input into a Command. Raises ParseError on unknown or malformed input."""
    match = _COMMAND_FORMAT.match((text or "").strip())
    if not match:
        raise _invalid_format("Enter a command, e.g. list")
    word = match.group("word")
    arguments = match.group("arguments")

    if word == MarkPaidCommand.COMMAND_WORD:
        index, months = _parse_index_and_months(arguments, MarkPaidCommand.MESSAGE_USAGE)
        return MarkPaidCommand(index, months)
    if word == UnmarkPaidCommand.COMMAND_WORD:
        index, months = _parse_index_and_months(arguments, UnmarkPaidCommand.MESSAGE_USAGE)
        return UnmarkPaidCommand(index, months)
    if word == DeleteCommand.COMMAND_WORD:
        return DeleteCommand(parse_index(arguments, DeleteCommand.MESSAGE_USAGE))
    if word == FindCommand.COMMAND_WORD:
        keywords = tuple(arguments.split())
        if not keywords:
            raise _invalid_format(FindCommand.MESSAGE_USAGE)
        return FindCommand(NameContainsKeywords(keywords))
    if word == ListCommand.COMMAND_WORD:
        return ListCommand()
    raise ParseError(MESSAGE_UNKNOWN_COMMAND)
