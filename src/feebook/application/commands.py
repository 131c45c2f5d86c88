"""Commands: one unit of user intent each, executed against a Model.

A command validates everything before writing, so a failing command
(CommandError) leaves the model untouched.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, replace

from feebook.application.dto import CommandResult, Index
from feebook.application.errors import CommandError
from feebook.application.messages import (
    MESSAGE_CONTACTS_LISTED_OVERVIEW,
    MESSAGE_INVALID_CONTACT_DISPLAYED_INDEX,
    format_contact,
    format_months_paid,
)
from feebook.application.ports import PREDICATE_SHOW_ALL_CONTACTS, Model
from feebook.domain import Contact, MonthPaid, as_months, invalid_month_message

logger = logging.getLogger(__name__)


class Command(ABC):
    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        ...


def _contact_at(model: Model, index: Index) -> Contact:
    shown = model.get_filtered_contact_list()
    if index.zero_based >= len(shown):
        raise CommandError(
            MESSAGE_INVALID_CONTACT_DISPLAYED_INDEX.format(index=index.one_based)
        )
    return shown[index.zero_based]


def _check_month_format(months: Iterable[MonthPaid]) -> None:
    for month in months:
        if not month.is_valid():
            raise CommandError(invalid_month_message(month.value))


def _months_repr(months: frozenset[MonthPaid]) -> str:
    return "[" + ", ".join(repr(m.value) for m in sorted(months)) + "]"


@dataclass(frozen=True, repr=False)
class MarkPaidCommand(Command):
    """Marks months as paid for the contact at index in the displayed list."""

    COMMAND_WORD = "markpaid"
    MESSAGE_USAGE = (
        "markpaid: Marks the months paid for the contact identified by the index "
        "number used in the displayed contact list.\n"
        "Parameters: INDEX (must be a positive integer) m/MONTH_PAID... (YYYY-MM)\n"
        "Example: markpaid 1 m/2024-01 m/2024-02"
    )
    MESSAGE_SUCCESS = "Marked contact as paid: {contact}"
    MESSAGE_DUPLICATE_MONTH = "Duplicate month paid: {month}"

    index: Index
    months_paid: frozenset[MonthPaid]

    def __post_init__(self):
        object.__setattr__(self, "months_paid", as_months(self.months_paid))

    def execute(self, model: Model) -> CommandResult:
        target = _contact_at(model, self.index)
        ordered = sorted(self.months_paid)

        _check_month_format(ordered)
        for month in ordered:
            if month in target.months_paid:
                raise CommandError(self.MESSAGE_DUPLICATE_MONTH.format(month=month))

        marked = replace(target, months_paid=target.months_paid | self.months_paid)
        model.set_contact(target, marked)
        model.update_filtered_contact_list(PREDICATE_SHOW_ALL_CONTACTS)
        logger.info("Marked %d month(s) paid for %s", len(ordered), marked.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(contact=format_months_paid(marked)))

    def __repr__(self) -> str:
        return (
            f"MarkPaidCommand(index={self.index.one_based}, "
            f"months_paid={_months_repr(self.months_paid)})"
        )


@dataclass(frozen=True, repr=False)
class UnmarkPaidCommand(Command):
    """Removes months from the paid set of the contact at index in the displayed list."""

    COMMAND_WORD = "unmarkpaid"
    MESSAGE_USAGE = (
        "unmarkpaid: Removes paid months from the contact identified by the index "
        "number used in the displayed contact list.\n"
        "Parameters: INDEX (must be a positive integer) m/MONTH_PAID... (YYYY-MM)\n"
        "Example: unmarkpaid 1 m/2024-01"
    )
    MESSAGE_SUCCESS = "Unmarked paid months for contact: {contact}"
    MESSAGE_MONTH_NOT_PAID = "Month not marked as paid: {month}"

    index: Index
    months_paid: frozenset[MonthPaid]

    def __post_init__(self):
        object.__setattr__(self, "months_paid", as_months(self.months_paid))

    def execute(self, model: Model) -> CommandResult:
        target = _contact_at(model, self.index)
        ordered = sorted(self.months_paid)

        _check_month_format(ordered)
        for month in ordered:
            if month not in target.months_paid:
                raise CommandError(self.MESSAGE_MONTH_NOT_PAID.format(month=month))

        unmarked = replace(target, months_paid=target.months_paid - self.months_paid)
        model.set_contact(target, unmarked)
        model.update_filtered_contact_list(PREDICATE_SHOW_ALL_CONTACTS)
        return CommandResult(self.MESSAGE_SUCCESS.format(contact=format_months_paid(unmarked)))

    def __repr__(self) -> str:
        return (
            f"UnmarkPaidCommand(index={self.index.one_based}, "
            f"months_paid={_months_repr(self.months_paid)})"
        )


@dataclass(frozen=True)
class AddCommand(Command):
    MESSAGE_SUCCESS = "New contact added: {contact}"
    MESSAGE_DUPLICATE_CONTACT = "This contact already exists in the address book"

    contact: Contact

    def execute(self, model: Model) -> CommandResult:
        if model.has_contact(self.contact):
            raise CommandError(self.MESSAGE_DUPLICATE_CONTACT)
        model.add_contact(self.contact)
        return CommandResult(self.MESSAGE_SUCCESS.format(contact=format_contact(self.contact)))


@dataclass(frozen=True)
class DeleteCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the contact identified by the index number used in the "
        "displayed contact list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    MESSAGE_SUCCESS = "Deleted contact: {contact}"

    index: Index

    def execute(self, model: Model) -> CommandResult:
        target = _contact_at(model, self.index)
        model.delete_contact(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(contact=format_contact(target)))


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_SUCCESS = "Listed all contacts"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_contact_list(PREDICATE_SHOW_ALL_CONTACTS)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class NameContainsKeywords:
    """Matches contacts having a name word equal to any keyword, ignoring case."""

    keywords: tuple[str, ...]

    def __call__(self, contact: Contact) -> bool:
        words = {w.lower() for w in contact.name.split()}
        return any(k.lower() in words for k in self.keywords)


@dataclass(frozen=True)
class FindCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all contacts whose names contain any of the given keywords "
        "(case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob"
    )

    predicate: NameContainsKeywords

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_contact_list(self.predicate)
        count = len(model.get_filtered_contact_list())
        return CommandResult(MESSAGE_CONTACTS_LISTED_OVERVIEW.format(count=count))
