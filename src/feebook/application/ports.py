"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol

from feebook.domain import Contact

ContactPredicate = Callable[[Contact], bool]


def PREDICATE_SHOW_ALL_CONTACTS(contact: Contact) -> bool:  # noqa: N802
    return True


class Model(Protocol):
    """Holds the contact list and the filter that decides which contacts are displayed."""

    def get_contact_list(self) -> list[Contact]:
        """Return every contact in insertion order."""
        ...

    def get_filtered_contact_list(self) -> list[Contact]:
        """Return the contacts passing the active filter, in insertion order."""
        ...

    def update_filtered_contact_list(self, predicate: ContactPredicate) -> None:
        """Replace the active filter."""
        ...

    def has_contact(self, contact: Contact) -> bool:
        """Return True if a contact with the same name or phone is already stored."""
        ...

    def add_contact(self, contact: Contact) -> None:
        ...

    def delete_contact(self, target: Contact) -> None:
        """Remove the contact equal to target. Raises ContactNotFoundError if absent."""
        ...

    def set_contact(self, target: Contact, edited: Contact) -> None:
        """Replace the contact equal to target with edited, keeping its position.
        Raises ContactNotFoundError if absent.
        """
        ...
