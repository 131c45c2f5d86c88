"""User-facing message templates and contact formatting."""

from feebook.domain import Contact

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_INVALID_CONTACT_DISPLAYED_INDEX = "The contact index provided is invalid: {index}"
MESSAGE_CONTACTS_LISTED_OVERVIEW = "{count} contacts listed!"


def _months(contact: Contact) -> str:
    return ", ".join(str(m) for m in contact.sorted_months_paid())


def format_contact(contact: Contact) -> str:
    """Render every field of a contact on one line."""
    tags = "".join(str(t) for t in contact.sorted_tags())
    return (
        f"{contact.name}; Phone: {contact.phone}; Email: {contact.email}; "
        f"Address: {contact.address}; Fees: {contact.fees}; "
        f"Class Id: {contact.class_id}; Months Paid: {_months(contact)}; Tags: {tags}"
    )


def format_months_paid(contact: Contact) -> str:
    return f"{contact.name}; Months Paid: {_months(contact)}"
