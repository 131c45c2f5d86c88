"""In-memory implementation of the Model port."""

import logging

from feebook.application.errors import ContactNotFoundError
from feebook.application.ports import PREDICATE_SHOW_ALL_CONTACTS, ContactPredicate
from feebook.domain import Contact
from feebook.infrastructure.phone import phone_key

logger = logging.getLogger(__name__)


class ModelManager:
    """Stores contacts in memory. Order preserved by insertion.
    Contacts are replaced and removed by value: the caller passes the snapshot it read.
    """

    def __init__(
        self,
        contacts: list[Contact] | None = None,
        *,
        phone_region: str | None = None,
    ) -> None:
        self._contacts: list[Contact] = list(contacts or [])
        self._phone_region = phone_region
        self._predicate: ContactPredicate = PREDICATE_SHOW_ALL_CONTACTS
        logger.debug("Initialized model with %d contacts", len(self._contacts))

    def _position(self, target: Contact) -> int:
        try:
            return self._contacts.index(target)
        except ValueError:
            raise ContactNotFoundError(f"No such contact: {target.name}") from None

    def _is_same_contact(self, a: Contact, b: Contact) -> bool:
        if a.name.lower() == b.name.lower():
            return True
        key_a = phone_key(a.phone, self._phone_region)
        return bool(key_a) and key_a == phone_key(b.phone, self._phone_region)

    def get_contact_list(self) -> list[Contact]:
        return list(self._contacts)

    def get_filtered_contact_list(self) -> list[Contact]:
        return [c for c in self._contacts if self._predicate(c)]

    def update_filtered_contact_list(self, predicate: ContactPredicate) -> None:
        self._predicate = predicate

    def has_contact(self, contact: Contact) -> bool:
        return any(self._is_same_contact(contact, c) for c in self._contacts)

    def add_contact(self, contact: Contact) -> None:
        self._contacts.append(contact)
        self._predicate = PREDICATE_SHOW_ALL_CONTACTS

    def delete_contact(self, target: Contact) -> None:
        del self._contacts[self._position(target)]

    def set_contact(self, target: Contact, edited: Contact) -> None:
        self._contacts[self._position(target)] = edited
